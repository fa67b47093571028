import pytest

from heapsim.dynamic_array import DynamicArray, main
from heapsim.heap import Heap


@pytest.fixture
def heap():
    return Heap()


def make(heap, values, capacity=4):
    array = DynamicArray(heap, capacity)
    for value in values:
        array.insert(value)
    return array


def test_insert_and_iterate(heap):
    array = make(heap, [10, 20, 30], capacity=5)
    assert list(array) == [10, 20, 30]
    assert len(array) == 3
    assert array.capacity == 5


def test_grows_by_doubling(heap):
    array = make(heap, [1, 2, 3], capacity=2)
    assert array.capacity == 2 * 2
    assert list(array) == [1, 2, 3]


def test_zero_capacity_grows(heap):
    array = make(heap, [7, 8], capacity=0)
    assert list(array) == [7, 8]
    assert array.capacity >= 2


def test_remove_shifts_elements(heap):
    array = make(heap, [10, 20, 30], capacity=5)
    array.remove(1)
    assert list(array) == [10, 30]


def test_remove_last(heap):
    array = make(heap, [1, 2, 3])
    array.remove(2)
    assert list(array) == [1, 2]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_out_of_bounds(heap, index):
    array = make(heap, [1, 2, 3])
    with pytest.raises(IndexError):
        array.remove(index)
    assert list(array) == [1, 2, 3]


def test_shrinks_when_sparse(heap):
    array = make(heap, [1, 2, 3], capacity=16)
    array.remove(0)
    assert array.capacity == 16 // 2
    assert list(array) == [2, 3]


def test_no_shrink_when_emptied(heap):
    array = make(heap, [1], capacity=16)
    array.remove(0)
    assert len(array) == 0
    assert array.capacity == 16


def test_resize_smaller_truncates(heap):
    array = make(heap, [1, 2, 3, 4])
    array.resize(2)
    assert list(array) == [1, 2]
    assert array.capacity == 2


def test_resize_larger_keeps_contents(heap):
    array = make(heap, [10, 30], capacity=5)
    array.resize(10)
    assert list(array) == [10, 30]
    assert array.capacity == 10


def test_contents_survive_move(heap):
    array = make(heap, [1, 2], capacity=2)
    blocker = heap.malloc(4)
    heap.write_int(blocker, -1)
    array.insert(3)
    assert list(array) == [1, 2, 3]
    assert heap.read_int(blocker) == -1


def test_getitem(heap):
    array = make(heap, [4, 5, 6])
    assert array[0] == 4
    assert array[-1] == 6
    with pytest.raises(IndexError):
        array[3]


def test_str(heap):
    assert str(DynamicArray(heap, 3)) == "[]"
    assert str(make(heap, [1, 2])) == "[1, 2]"


def test_free_resets_and_releases(heap):
    array = make(heap, [1, 2, 3])
    array.free()
    assert len(array) == 0
    assert array.capacity == 0
    assert list(heap.blocks()) == []


def test_negative_capacity(heap):
    with pytest.raises(ValueError):
        DynamicArray(heap, -1)
    array = DynamicArray(heap, 2)
    with pytest.raises(ValueError):
        array.resize(-3)


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "[10, 20, 30]\n[10, 30]\n[10, 30]\n"