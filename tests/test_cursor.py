import pytest

from cadena.errors import (
    EndOfSequenceError,
    IllegalCursorStateError,
    IndexOutOfRangeError,
    UnsupportedBackwardTraversalError,
)
from cadena.linked_list import SinglyLinkedList


def test_set_then_remove_while_walking() -> None:
    items = SinglyLinkedList(["A", "B", "C"])
    cursor = items.cursor_at(0)

    assert cursor.next() == "A"
    assert cursor.next_index() == 1
    cursor.set("X")
    assert items.to_list() == ["X", "B", "C"]

    assert cursor.next() == "B"
    cursor.remove()
    assert items.to_list() == ["X", "C"]
    assert items.size() == 2
    assert cursor.next_index() == 1
    assert cursor.next() == "C"


def test_fresh_cursor_cannot_edit() -> None:
    items = SinglyLinkedList(["A"])
    cursor = items.iterate()

    assert not cursor.has_pending_edit
    with pytest.raises(IllegalCursorStateError):
        cursor.remove()
    with pytest.raises(IllegalCursorStateError):
        cursor.set("B")


def test_edit_permission_is_consumed() -> None:
    items = SinglyLinkedList(["A", "B"])
    cursor = items.iterate()
    cursor.next()
    cursor.set("X")

    with pytest.raises(IllegalCursorStateError):
        cursor.set("Y")
    with pytest.raises(IllegalCursorStateError):
        cursor.remove()

    cursor.next()
    cursor.remove()
    with pytest.raises(IllegalCursorStateError):
        cursor.remove()
    assert items.to_list() == ["X"]


def test_exhausted_cursor_raises_end_of_sequence() -> None:
    items = SinglyLinkedList(["A", "B"])
    cursor = items.iterate()
    while cursor.has_next():
        cursor.next()

    with pytest.raises(EndOfSequenceError):
        cursor.next()


def test_edits_after_reaching_the_end_target_last_returned_node() -> None:
    items = SinglyLinkedList(["A", "B"])
    cursor = items.cursor_at(1)

    assert cursor.next() == "B"
    assert not cursor.has_next()
    cursor.remove()
    assert items.to_list() == ["A"]

    cursor.insert("C")
    assert items.to_list() == ["A", "C"]
    assert not cursor.has_next()


def test_removing_head_through_cursor() -> None:
    items = SinglyLinkedList(["A", "B"])
    cursor = items.iterate()
    cursor.next()
    cursor.remove()

    assert items.to_list() == ["B"]
    assert cursor.next_index() == 0
    assert cursor.previous_index() == -1
    assert cursor.next() == "B"
    cursor.remove()
    assert items.is_empty()
    assert items.to_display_string() == ""


def test_backward_traversal_is_unsupported() -> None:
    cursor = SinglyLinkedList(["A"]).iterate()

    assert not cursor.has_previous()
    with pytest.raises(UnsupportedBackwardTraversalError):
        cursor.previous()
    cursor.next()
    with pytest.raises(NotImplementedError):
        cursor.previous()


def test_insert_splices_before_next_element() -> None:
    items = SinglyLinkedList(["A", "C"])
    cursor = items.iterate()

    cursor.insert("start")
    assert items.to_list() == ["start", "A", "C"]
    assert cursor.next() == "A"
    cursor.insert("B")
    assert items.to_list() == ["start", "A", "B", "C"]
    assert items.size() == 4
    assert items.get(cursor.previous_index()) == "B"
    assert cursor.next() == "C"


def test_insert_clears_pending_edit() -> None:
    items = SinglyLinkedList(["A"])
    cursor = items.iterate()
    cursor.next()
    cursor.insert("B")

    assert not cursor.has_pending_edit
    with pytest.raises(IllegalCursorStateError):
        cursor.remove()
    assert items.to_list() == ["A", "B"]


def test_insert_into_empty_list_sets_head() -> None:
    items: SinglyLinkedList[str] = SinglyLinkedList()
    cursor = items.iterate()
    cursor.insert("A")
    cursor.insert("B")

    assert items.to_list() == ["A", "B"]
    assert cursor.next_index() == 2
    assert not cursor.has_next()


def test_cursor_at_positions_first_read() -> None:
    items = SinglyLinkedList(["A", "B", "C"])

    assert items.cursor_at(2).next() == "C"
    assert not items.cursor_at(3).has_next()
    assert items.cursor_at(3).next_index() == 3
    for index in (-1, 4):
        with pytest.raises(IndexOutOfRangeError):
            items.cursor_at(index)


def test_cursor_supports_python_iteration() -> None:
    items = SinglyLinkedList(["A", "B", "C"])

    assert list(items.cursor_at(1)) == ["B", "C"]
    assert [element for element in items] == ["A", "B", "C"]
    assert "B" in items


def test_filtering_in_place_while_iterating() -> None:
    items = SinglyLinkedList([1, 2, 3, 4, 5, 6])
    cursor = items.iterate()
    for value in cursor:
        if value % 2 == 0:
            cursor.remove()

    assert items.to_list() == [1, 3, 5]
    assert items.size() == 3
