import pytest

from heapsim.heap import Heap, OutOfMemoryError
from heapsim.linked_list import LinkedList, main


@pytest.fixture
def heap():
    return Heap()


def test_push_prepends(heap):
    items = LinkedList(heap)
    items.push(1)
    items.push(2)
    items.push(3)
    assert list(items) == [3, 2, 1]


def test_append_appends(heap):
    items = LinkedList(heap)
    items.append(1)
    items.append(2)
    items.append(3)
    assert list(items) == [1, 2, 3]


def test_mixed_operations_keep_order(heap):
    items = LinkedList(heap)
    items.append(10)
    items.push(20)
    items.push(30)
    items.append(40)
    assert list(items) == [30, 20, 10, 40]


def test_empty_list_string(heap):
    assert str(LinkedList(heap)) == "NULL"


def test_single_item_string(heap):
    items = LinkedList(heap)
    items.push(7)
    assert str(items) == "7 -> NULL"


def test_string_lists_every_value(heap):
    items = LinkedList(heap)
    for value in (5, 6, 8):
        items.append(value)
    text = str(items)
    assert text.endswith("NULL")
    assert [int(part) for part in text.split(" -> ")[:-1]] == [5, 6, 8]


def test_delete_head(heap):
    items = LinkedList(heap)
    for value in (1, 2, 3):
        items.append(value)
    items.delete(1)
    assert list(items) == [2, 3]


def test_delete_middle_and_tail(heap):
    items = LinkedList(heap)
    for value in (1, 2, 3, 4):
        items.append(value)
    items.delete(2)
    items.delete(4)
    assert list(items) == [1, 3]


def test_delete_only_first_match(heap):
    items = LinkedList(heap)
    for value in (5, 9, 5):
        items.append(value)
    items.delete(5)
    assert list(items) == [9, 5]


def test_delete_missing_raises(heap):
    items = LinkedList(heap)
    items.append(1)
    with pytest.raises(KeyError):
        items.delete(99)
    assert list(items) == [1]


def test_delete_from_empty_raises(heap):
    with pytest.raises(KeyError):
        LinkedList(heap).delete(1)


def test_clear_releases_heap(heap):
    items = LinkedList(heap)
    for value in range(6):
        items.push(value)
    assert len(list(heap.blocks())) == 6
    items.clear()
    assert list(items) == []
    assert list(heap.blocks()) == []


def test_deleting_everything_releases_heap(heap):
    items = LinkedList(heap)
    for value in range(4):
        items.append(value)
    for value in range(4):
        items.delete(value)
    assert list(heap.blocks()) == []


def test_freed_node_is_reused(heap):
    items = LinkedList(heap)
    for value in (1, 2, 3):
        items.append(value)
    items.delete(2)
    blocks_before = len(list(heap.blocks()))
    items.append(4)
    assert len(list(heap.blocks())) == blocks_before
    assert list(items) == [1, 3, 4]


def test_negative_values_round_trip(heap):
    items = LinkedList(heap)
    items.append(-5)
    items.append(2**31 - 1)
    assert list(items) == [-5, 2**31 - 1]


def test_out_of_memory():
    items = LinkedList(Heap(limit=10))
    with pytest.raises(OutOfMemoryError):
        items.push(1)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Linked list: 30 -> 20 -> 10 -> 40 -> NULL",
        "After deleting 20: 30 -> 10 -> 40 -> NULL",
    ]