import pytest

from structkit.doubly_linked import DoublyLinkedList

VALUES = [4, 8, 15, 16]


def test_iteration_follows_construction_order():
    dll = DoublyLinkedList(VALUES)
    assert list(dll) == VALUES
    assert len(dll) == len(VALUES)


def test_reversed_walks_backwards():
    dll = DoublyLinkedList(VALUES)
    assert list(reversed(dll)) == VALUES[::-1]


def test_empty_list():
    dll = DoublyLinkedList()
    assert list(dll) == []
    assert list(reversed(dll)) == []
    assert len(dll) == 0


def test_insert_beginning():
    dll = DoublyLinkedList(VALUES)
    dll.insert_beginning(99)
    assert list(dll) == [99] + VALUES
    assert list(reversed(dll)) == ([99] + VALUES)[::-1]


def test_insert_beginning_into_empty():
    dll = DoublyLinkedList()
    dll.insert_beginning(7)
    assert list(dll) == [7]
    assert list(reversed(dll)) == [7]


def test_insert_end():
    dll = DoublyLinkedList(VALUES)
    dll.insert_end(99)
    assert list(dll) == VALUES + [99]
    assert next(reversed(dll)) == 99


def test_insert_after_middle():
    dll = DoublyLinkedList(VALUES)
    dll.insert_after(VALUES[1], 99)
    expected = VALUES[:2] + [99] + VALUES[2:]
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]
    assert len(dll) == len(expected)


def test_insert_after_last_moves_tail():
    dll = DoublyLinkedList(VALUES)
    dll.insert_after(VALUES[-1], 99)
    assert list(dll) == VALUES + [99]
    assert next(reversed(dll)) == 99


def test_insert_after_missing_target():
    dll = DoublyLinkedList(VALUES)
    with pytest.raises(ValueError):
        dll.insert_after(1000, 1)
    assert list(dll) == VALUES


def test_delete_beginning():
    dll = DoublyLinkedList(VALUES)
    assert dll.delete_beginning() == VALUES[0]
    assert list(dll) == VALUES[1:]
    assert list(reversed(dll)) == VALUES[1:][::-1]


def test_delete_end():
    dll = DoublyLinkedList(VALUES)
    assert dll.delete_end() == VALUES[-1]
    assert list(dll) == VALUES[:-1]
    assert list(reversed(dll)) == VALUES[:-1][::-1]


def test_delete_single_node_empties_list():
    dll = DoublyLinkedList([5])
    assert dll.delete_end() == 5
    assert list(dll) == []
    assert len(dll) == 0
    dll.append(6)
    assert list(dll) == [6]


def test_delete_beginning_from_empty_raises():
    dll = DoublyLinkedList()
    with pytest.raises(IndexError):
        dll.delete_beginning()
    assert len(dll) == 0


def test_delete_end_from_empty_raises():
    dll = DoublyLinkedList()
    with pytest.raises(IndexError):
        dll.delete_end()
    assert len(dll) == 0


def test_delete_after():
    dll = DoublyLinkedList(VALUES)
    assert dll.delete_after(VALUES[0]) == VALUES[1]
    expected = VALUES[:1] + VALUES[2:]
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]


def test_delete_after_removing_last():
    dll = DoublyLinkedList(VALUES)
    assert dll.delete_after(VALUES[-2]) == VALUES[-1]
    assert list(reversed(dll)) == VALUES[:-1][::-1]


def test_delete_after_last_raises():
    dll = DoublyLinkedList(VALUES)
    with pytest.raises(IndexError):
        dll.delete_after(VALUES[-1])


def test_delete_after_missing_target():
    dll = DoublyLinkedList(VALUES)
    with pytest.raises(ValueError):
        dll.delete_after(1000)


def test_display_format():
    dll = DoublyLinkedList([1, 2, 3])
    assert dll.display() == "1\t2\t3\t"


def test_links_stay_consistent_after_mixed_operations():
    dll = DoublyLinkedList(VALUES)
    dll.insert_beginning(0)
    dll.insert_after(VALUES[2], 50)
    dll.delete_end()
    dll.delete_after(0)
    dll.append(77)
    assert list(reversed(dll)) == list(dll)[::-1]
    assert len(dll) == len(list(dll))