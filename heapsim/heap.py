"""A simulated program-break heap with a first-fit, coalescing allocator.

Memory is a growable byte array that stands for the region between the
heap start and the program break. Every block is preceded by a header of
``META_SIZE`` bytes; the header's bookkeeping is kept in :class:`Block`
objects forming a doubly linked list in address order. Addresses handed
out are offsets of the first data byte, so ``None`` plays the part of a
null pointer.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

META_SIZE = 32
INT_SIZE = 4
DEFAULT_LIMIT = 1 << 20
_MIN_SPLIT = 4


class OutOfMemoryError(MemoryError):
    """Raised when the heap cannot grow past its limit."""


def align4(size: int) -> int:
    """Round ``size`` up to a multiple of four; zero stays zero."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return 0
    return (((size - 1) >> 2) << 2) + 4


@dataclass
class Block:
    """Bookkeeping for one block: header offset, data size and state."""

    header: int
    size: int
    free: bool = False
    next: Block | None = field(default=None, repr=False, compare=False)
    prev: Block | None = field(default=None, repr=False, compare=False)

    @property
    def address(self) -> int:
        """Offset of the first data byte of the block."""
        return self.header + META_SIZE

    @property
    def end(self) -> int:
        """Offset just past the last data byte of the block."""
        return self.address + self.size


class Heap:
    """A heap that grows and shrinks its break like ``sbrk``/``brk``."""

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if limit < 0:
            raise ValueError(f"limit must not be negative: {limit}")
        self.limit = limit
        self._memory = bytearray()
        self._base: Block | None = None
        self._headers: dict[int, Block] = {}

    # -- block list management -------------------------------------------

    def blocks(self) -> Iterator[Block]:
        """Yield every block in address order."""
        block = self._base
        while block is not None:
            yield block
            block = block.next

    def block_at(self, address: int) -> Block:
        """Return the block whose data starts at ``address``."""
        try:
            return self._headers[address - META_SIZE]
        except KeyError:
            raise ValueError(f"no block starts at address {address}") from None

    def _find_free_block(self, size: int) -> tuple[Block | None, Block | None]:
        last = None
        for block in self.blocks():
            last = block
            if block.free and block.size >= size:
                return block, last
        return None, last

    def _extend_heap(self, last: Block | None, size: int) -> Block:
        header = len(self._memory)
        if header + META_SIZE + size > self.limit:
            raise OutOfMemoryError(
                f"cannot grow heap by {META_SIZE + size} bytes past limit {self.limit}"
            )
        self._memory.extend(bytes(META_SIZE + size))
        block = Block(header, size, free=False, prev=last)
        if last is not None:
            last.next = block
        self._headers[header] = block
        return block

    def _split_block(self, block: Block, size: int) -> None:
        if block.size < META_SIZE + size + _MIN_SPLIT:
            return
        remainder = Block(
            block.header + META_SIZE + size,
            block.size - META_SIZE - size,
            free=True,
            next=block.next,
            prev=block,
        )
        if remainder.next is not None:
            remainder.next.prev = remainder
        block.next = remainder
        block.size = size
        self._headers[remainder.header] = remainder

    def _merge_block(self, block: Block) -> None:
        neighbour = block.next
        if neighbour is None or not neighbour.free:
            return
        del self._headers[neighbour.header]
        block.size += META_SIZE + neighbour.size
        block.next = neighbour.next
        if block.next is not None:
            block.next.prev = block

    def _allocated(self, address: int) -> Block:
        block = self.block_at(address)
        if block.free:
            raise ValueError(f"block at address {address} is not allocated")
        return block

    # -- allocator interface ---------------------------------------------

    def malloc(self, size: int) -> int | None:
        """Allocate ``size`` bytes; return the address, or ``None`` for zero."""
        size = align4(size)
        if size == 0:
            return None
        if self._base is None:
            block = self._extend_heap(None, size)
            self._base = block
            return block.address
        block, last = self._find_free_block(size)
        if block is None:
            block = self._extend_heap(last, size)
        else:
            if block.size - size >= META_SIZE + _MIN_SPLIT:
                self._split_block(block, size)
            block.free = False
        return block.address

    def free(self, address: int | None) -> None:
        """Release the block at ``address``; ``None`` is ignored."""
        if address is None:
            return
        block = self._allocated(address)
        block.free = True
        self._merge_block(block)
        if block.prev is not None and block.prev.free:
            self._merge_block(block.prev)
            block = block.prev
        if block.next is None:
            if block.prev is not None:
                block.prev.next = None
            else:
                self._base = None
            del self._headers[block.header]
            del self._memory[block.header:]

    def calloc(self, count: int, size: int) -> int | None:
        """Allocate ``count * size`` bytes set to zero."""
        if count < 0 or size < 0:
            raise ValueError("count and size must not be negative")
        total = count * size
        address = self.malloc(total)
        if address is not None:
            self._memory[address:address + total] = bytes(total)
        return address

    def realloc(self, address: int | None, size: int) -> int | None:
        """Resize the block at ``address``, moving its data if needed."""
        if address is None:
            return self.malloc(size)
        if size == 0:
            self.free(address)
            return None
        size = align4(size)
        block = self._allocated(address)

        if block.size >= size:
            if block.size - size >= META_SIZE + _MIN_SPLIT:
                self._split_block(block, size)
            return address

        neighbour = block.next
        if (
            neighbour is not None
            and neighbour.free
            and block.size + META_SIZE + neighbour.size >= size
        ):
            self._merge_block(block)
            if block.size - size >= META_SIZE + _MIN_SPLIT:
                self._split_block(block, size)
            if block.size >= size:
                return address

        new_address = self.malloc(size)
        if new_address is None:
            return None
        self._memory[new_address:new_address + block.size] = (
            self._memory[address:address + block.size]
        )
        self.free(address)
        return new_address

    # -- memory access ---------------------------------------------------

    def _check_range(self, address: int, length: int) -> None:
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        for block in self.blocks():
            if not block.free and block.address <= address and address + length <= block.end:
                return
        raise ValueError(
            f"range [{address}, {address + length}) is not inside an allocated block"
        )

    def read(self, address: int, length: int) -> bytes:
        """Return ``length`` bytes starting at ``address``."""
        self._check_range(address, length)
        return bytes(self._memory[address:address + length])

    def write(self, address: int, data: bytes) -> None:
        """Store ``data`` starting at ``address``."""
        self._check_range(address, len(data))
        self._memory[address:address + len(data)] = data

    def read_int(self, address: int) -> int:
        """Read a signed 32-bit little-endian integer."""
        return int.from_bytes(self.read(address, INT_SIZE), "little", signed=True)

    def write_int(self, address: int, value: int) -> None:
        """Write a signed 32-bit little-endian integer."""
        self.write(address, value.to_bytes(INT_SIZE, "little", signed=True))