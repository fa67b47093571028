"""A singly linked list of integers whose nodes live on a simulated heap."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

from heapsim.heap import Heap

NODE_SIZE = 16
_NEXT_OFFSET = 8
_POINTER_SIZE = 8
_NULL = 0


class LinkedList:
    """Integer list built from heap-allocated nodes of data and next pointer."""

    def __init__(self, heap: Heap) -> None:
        self.heap = heap
        self._head: int | None = None

    def _next(self, address: int) -> int | None:
        raw = self.heap.read(address + _NEXT_OFFSET, _POINTER_SIZE)
        return int.from_bytes(raw, "little") or None

    def _set_next(self, address: int, next_address: int | None) -> None:
        pointer = (next_address or _NULL).to_bytes(_POINTER_SIZE, "little")
        self.heap.write(address + _NEXT_OFFSET, pointer)

    def _new_node(self, value: int, next_address: int | None) -> int:
        address = self.heap.malloc(NODE_SIZE)
        self.heap.write_int(address, value)
        self._set_next(address, next_address)
        return address

    def _nodes(self) -> Iterator[int]:
        address = self._head
        while address is not None:
            yield address
            address = self._next(address)

    def push(self, value: int) -> None:
        """Insert ``value`` at the front of the list."""
        self._head = self._new_node(value, self._head)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = self._new_node(value, None)
        last = None
        for last in self._nodes():
            pass
        if last is None or last == node:
            self._head = node
        else:
            self._set_next(last, node)

    def delete(self, key: int) -> None:
        """Remove the first node holding ``key``; raise KeyError if absent."""
        previous = None
        for address in self._nodes():
            if self.heap.read_int(address) == key:
                following = self._next(address)
                if previous is None:
                    self._head = following
                else:
                    self._set_next(previous, following)
                self.heap.free(address)
                return
            previous = address
        raise KeyError(key)

    def clear(self) -> None:
        """Free every node, leaving the list empty."""
        while self._head is not None:
            node = self._head
            self._head = self._next(node)
            self.heap.free(node)

    def __iter__(self) -> Iterator[int]:
        for address in self._nodes():
            yield self.heap.read_int(address)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


def main(argv: list[str] | None = None) -> int:
    """Build a small list, delete one value and print it before and after."""
    parser = argparse.ArgumentParser(
        description="Show a linked list stored on a simulated heap."
    )
    parser.parse_args(argv)

    items = LinkedList(Heap())
    items.append(10)
    items.push(20)
    items.push(30)
    items.append(40)
    print(f"Linked list: {items}")

    try:
        items.delete(20)
    except KeyError:
        print("Key 20 not found in the list.")
    print(f"After deleting 20: {items}")

    items.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())