"""A growable integer array whose storage is a single heap block."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

from heapsim.heap import INT_SIZE, Heap


class DynamicArray:
    """Integer array that doubles when full and halves when mostly empty."""

    def __init__(self, heap: Heap, initial_capacity: int) -> None:
        if initial_capacity < 0:
            raise ValueError(f"capacity must not be negative: {initial_capacity}")
        self.heap = heap
        self._data = heap.malloc(initial_capacity * INT_SIZE)
        self._size = 0
        self._capacity = initial_capacity

    @property
    def capacity(self) -> int:
        """Number of elements the storage can hold."""
        return self._capacity

    def resize(self, new_capacity: int) -> None:
        """Reallocate storage for ``new_capacity`` elements, truncating if needed."""
        if new_capacity < 0:
            raise ValueError(f"capacity must not be negative: {new_capacity}")
        self._data = self.heap.realloc(self._data, new_capacity * INT_SIZE)
        self._capacity = new_capacity
        if self._size > new_capacity:
            self._size = new_capacity

    def insert(self, value: int) -> None:
        """Append ``value``, doubling the capacity when the array is full."""
        if self._size >= self._capacity:
            self.resize(max(self._capacity * 2, 1))
        self.heap.write_int(self._data + self._size * INT_SIZE, value)
        self._size += 1

    def remove(self, index: int) -> None:
        """Delete the element at ``index``, shrinking storage when sparse."""
        if not 0 <= index < self._size:
            raise IndexError(f"Index {index} out of bounds")
        tail = (self._size - index - 1) * INT_SIZE
        if tail:
            start = self._data + (index + 1) * INT_SIZE
            self.heap.write(start - INT_SIZE, self.heap.read(start, tail))
        self._size -= 1
        if 0 < self._size < self._capacity // 4:
            self.resize(max(self._capacity // 2, 1))

    def free(self) -> None:
        """Release the storage and reset the array to empty."""
        self.heap.free(self._data)
        self._data = None
        self._size = 0
        self._capacity = 0

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("array index out of range")
        return self.heap.read_int(self._data + index * INT_SIZE)

    def __iter__(self) -> Iterator[int]:
        for index in range(self._size):
            yield self.heap.read_int(self._data + index * INT_SIZE)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"


def main(argv: list[str] | None = None) -> int:
    """Insert, remove and resize a small array, printing it along the way."""
    parser = argparse.ArgumentParser(
        description="Show a dynamic array stored on a simulated heap."
    )
    parser.parse_args(argv)

    array = DynamicArray(Heap(), 5)
    for value in (10, 20, 30):
        array.insert(value)
    print(array)
    try:
        array.remove(1)
    except IndexError as error:
        print(error)
    print(array)
    array.resize(10)
    print(array)
    array.free()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())