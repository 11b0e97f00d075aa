import pytest

from cadena.workbench import ListWorkbench


def test_snapshot_describes_list_and_cursor() -> None:
    workbench = ListWorkbench(["a", "b", "a"])

    snapshot = workbench.snapshot()

    assert snapshot.elements == ("a", "b", "a")
    assert snapshot.display == "a -> b -> a"
    assert snapshot.size == 3
    assert snapshot.unique_count == 2
    assert snapshot.cursor is not None
    assert snapshot.cursor.next_index == 0
    assert snapshot.cursor.fresh_index is None
    assert snapshot.ok


def test_cursor_commands_track_fresh_node() -> None:
    workbench = ListWorkbench(["A", "B", "C"])

    snapshot = workbench.cursor_next()
    assert snapshot.cursor is not None
    assert snapshot.cursor.fresh_index == 0
    assert snapshot.cursor.next_index == 1

    snapshot = workbench.cursor_set("X")
    assert snapshot.elements == ("X", "B", "C")
    assert snapshot.cursor is not None
    assert snapshot.cursor.fresh_index is None

    workbench.cursor_next()
    snapshot = workbench.cursor_remove()
    assert snapshot.ok
    assert snapshot.elements == ("X", "C")
    assert snapshot.size == 2


def test_list_errors_become_failed_snapshots() -> None:
    workbench = ListWorkbench()

    snapshot = workbench.remove_front()
    assert not snapshot.ok
    assert snapshot.message.startswith("EmptyListError")

    snapshot = workbench.cursor_remove()
    assert not snapshot.ok
    assert snapshot.message.startswith("IllegalCursorStateError")

    snapshot = workbench.cursor_previous()
    assert not snapshot.ok
    assert snapshot.message.startswith("UnsupportedBackwardTraversalError")


def test_direct_list_edits_drop_the_cursor() -> None:
    workbench = ListWorkbench(["A"])

    snapshot = workbench.add_back("B")
    assert snapshot.cursor is None

    snapshot = workbench.cursor_next()
    assert not snapshot.ok
    assert snapshot.message.startswith("StaleCursorError")

    snapshot = workbench.reset_cursor("1")
    assert snapshot.ok
    assert snapshot.cursor is not None
    assert snapshot.cursor.next_index == 1
    assert workbench.cursor_next().message == "next() returned 'B' from index 1."


def test_failed_list_command_keeps_the_cursor() -> None:
    workbench = ListWorkbench(["A"])

    snapshot = workbench.remove_at(5)

    assert not snapshot.ok
    assert snapshot.cursor is not None


def test_positions_are_parsed_from_text() -> None:
    workbench = ListWorkbench(["a", "c"])

    snapshot = workbench.insert_at(" 1 ", "b")
    assert snapshot.elements == ("a", "b", "c")
    assert workbench.get("2").message == "Position 2 holds 'c'."
    with pytest.raises(ValueError):
        workbench.get("two")


def test_history_is_bounded() -> None:
    workbench = ListWorkbench(history_limit=2)

    workbench.add_back("a")
    workbench.add_back("b")
    snapshot = workbench.add_back("c")

    assert snapshot.history == ("Added 'b' at the back.", "Added 'c' at the back.")
    assert workbench.contains("b").message == "'b' is in the list."
    assert workbench.count_unique().message == "3 unique of 3 elements."
