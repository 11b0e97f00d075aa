"""Errors raised by the linked list and its cursor."""

from __future__ import annotations


class ListError(Exception):
    """Base class for every precondition violation reported by the list."""


class InvalidPositionError(ListError, IndexError):
    """Positional access outside the valid range of the list."""


class IndexOutOfRangeError(ListError, IndexError):
    """A cursor was requested at an index past either end of the list."""


class EmptyListError(ListError, IndexError):
    """Removal from the front of an empty list."""


class EndOfSequenceError(ListError, LookupError):
    """A cursor was asked for an element after the last one."""


class UnsupportedBackwardTraversalError(ListError, NotImplementedError):
    """Singly linked cursors cannot move backwards."""


class IllegalCursorStateError(ListError, RuntimeError):
    """set() or remove() without a preceding, still valid next()."""


class StaleCursorError(ListError):
    """The workbench dropped its cursor after a direct edit of the list."""
