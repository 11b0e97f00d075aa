"""Headless controller that drives a linked list and one cursor over it."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from .errors import ListError, StaleCursorError
from .linked_list import ListCursor, SinglyLinkedList

Position = Union[int, str]


@dataclass(frozen=True)
class CursorState:
    """Where the active cursor sits and which node it may still edit."""

    next_index: int
    previous_index: int
    has_next: bool
    fresh_index: Optional[int]


@dataclass(frozen=True)
class WorkbenchSnapshot:
    """State of the list after a command, plus the command's outcome."""

    elements: tuple[str, ...]
    display: str
    size: int
    unique_count: int
    cursor: Optional[CursorState]
    ok: bool
    message: str
    history: tuple[str, ...]


class ListWorkbench:
    """Runs list and cursor commands and reports their outcome as snapshots.

    Commands made directly on the list drop the active cursor, since a
    cursor does not survive structural edits made through another handle.
    """

    def __init__(self, values: Optional[Iterable[str]] = None, history_limit: int = 20) -> None:
        if history_limit <= 0:
            raise ValueError("history_limit must be positive.")
        self._list: SinglyLinkedList[str] = SinglyLinkedList(values)
        self._cursor: Optional[ListCursor[str]] = self._list.iterate()
        self._fresh_index: Optional[int] = None
        self._history: deque[str] = deque(maxlen=history_limit)
        self._last_ok = True
        self._last_message = "Ready."

    def snapshot(self) -> WorkbenchSnapshot:
        """Return the current state without running a command."""
        cursor_state = None
        if self._cursor is not None:
            cursor_state = CursorState(
                next_index=self._cursor.next_index(),
                previous_index=self._cursor.previous_index(),
                has_next=self._cursor.has_next(),
                fresh_index=self._fresh_index if self._cursor.has_pending_edit else None,
            )
        elements = tuple(self._list)
        return WorkbenchSnapshot(
            elements=elements,
            display=self._list.to_display_string(),
            size=self._list.size(),
            unique_count=self._list.count_unique(),
            cursor=cursor_state,
            ok=self._last_ok,
            message=self._last_message,
            history=tuple(self._history),
        )

    # List commands

    def add_front(self, element: str) -> WorkbenchSnapshot:
        return self._run_structural(lambda: self._list.add_front(element), f"Added {element!r} at the front.")

    def add_back(self, element: str) -> WorkbenchSnapshot:
        return self._run_structural(lambda: self._list.add_back(element), f"Added {element!r} at the back.")

    def insert_at(self, position: Position, element: str) -> WorkbenchSnapshot:
        index = _parse_position(position)
        return self._run_structural(
            lambda: self._list.insert_at(index, element),
            f"Inserted {element!r} at position {index}.",
        )

    def remove_value(self, element: str) -> WorkbenchSnapshot:
        def command() -> str:
            if self._list.remove_value(element):
                return f"Removed the first {element!r}."
            return f"{element!r} is not in the list."

        return self._run_structural(command)

    def remove_front(self) -> WorkbenchSnapshot:
        return self._run_structural(lambda: f"Removed {self._list.remove_front()!r} from the front.")

    def remove_at(self, position: Position) -> WorkbenchSnapshot:
        index = _parse_position(position)
        return self._run_structural(lambda: f"Removed {self._list.remove_at(index)!r} at position {index}.")

    def get(self, position: Position) -> WorkbenchSnapshot:
        index = _parse_position(position)
        return self._run(lambda: f"Position {index} holds {self._list.get(index)!r}.")

    def contains(self, element: str) -> WorkbenchSnapshot:
        return self._run(
            lambda: f"{element!r} is {'in' if self._list.contains(element) else 'not in'} the list."
        )

    def count_unique(self) -> WorkbenchSnapshot:
        return self._run(lambda: f"{self._list.count_unique()} unique of {self._list.size()} elements.")

    # Cursor commands

    def reset_cursor(self, index: Position = 0) -> WorkbenchSnapshot:
        start = _parse_position(index)

        def command() -> str:
            self._cursor = self._list.cursor_at(start)
            self._fresh_index = None
            return f"New cursor at index {start}."

        return self._run(command)

    def cursor_next(self) -> WorkbenchSnapshot:
        def command() -> str:
            cursor = self._require_cursor()
            index = cursor.next_index()
            element = cursor.next()
            self._fresh_index = index
            return f"next() returned {element!r} from index {index}."

        return self._run(command)

    def cursor_insert(self, element: str) -> WorkbenchSnapshot:
        def command() -> str:
            cursor = self._require_cursor()
            cursor.insert(element)
            self._fresh_index = None
            return f"Inserted {element!r} at index {cursor.previous_index()}."

        return self._run(command)

    def cursor_set(self, element: str) -> WorkbenchSnapshot:
        def command() -> str:
            cursor = self._require_cursor()
            cursor.set(element)
            return f"Replaced the element at index {self._fresh_index} with {element!r}."

        return self._run(command)

    def cursor_remove(self) -> WorkbenchSnapshot:
        def command() -> str:
            cursor = self._require_cursor()
            cursor.remove()
            return f"Removed the element at index {self._fresh_index}."

        return self._run(command)

    def cursor_previous(self) -> WorkbenchSnapshot:
        def command() -> str:
            cursor = self._require_cursor()
            return f"previous() returned {cursor.previous()!r}."

        return self._run(command)

    def _require_cursor(self) -> ListCursor[str]:
        if self._cursor is None:
            raise StaleCursorError("The list changed; reset the cursor first.")
        return self._cursor

    def _run_structural(
        self, command: Callable[[], Optional[str]], success: str = ""
    ) -> WorkbenchSnapshot:
        def wrapped() -> str:
            outcome = command()
            self._cursor = None
            self._fresh_index = None
            return outcome or success

        return self._run(wrapped)

    def _run(self, command: Callable[[], str]) -> WorkbenchSnapshot:
        try:
            message = command()
        except ListError as exc:
            self._record(False, f"{type(exc).__name__}: {exc}")
        else:
            self._record(True, message)
        return self.snapshot()

    def _record(self, ok: bool, message: str) -> None:
        self._last_ok = ok
        self._last_message = message
        self._history.append(message)


def _parse_position(position: Position) -> int:
    """Accept an int or a numeric string, as typed into a text field."""
    if isinstance(position, bool):
        raise ValueError("position must be an integer.")
    if isinstance(position, int):
        return position
    try:
        return int(position.strip())
    except ValueError:
        raise ValueError(f"position must be an integer, got {position!r}.") from None
