# heapsim

heapsim simulates a small memory allocator in pure Python. The heap is a
growable byte array. Addresses are plain integer offsets into it, and `None`
serves as the null address. Every allocation is preceded by a metadata header
of `META_SIZE` (32) bytes. The allocator keeps its blocks in a doubly linked
list in address order and picks them first-fit. It splits large free blocks
and merges adjacent free blocks. When the last block is freed, the heap
shrinks. Every size is rounded up to a multiple of 4.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the allocator

```python
from heapsim.heap import Heap, OutOfMemoryError, align4

heap = Heap(limit=4096)            # the heap may grow to 4096 bytes in total

p = heap.malloc(10)                # rounded up: align4(10) == 12
heap.write(p, b"hello")
print(heap.read(p, 5))             # b'hello'

q = heap.calloc(4, 4)              # 16 zeroed bytes
heap.write_int(q, 42)              # signed 32-bit little-endian
print(heap.read_int(q))            # 42

q = heap.realloc(q, 64)            # grows in place when it can, otherwise moves
for block in heap.blocks():        # Block(header, size, free) in address order
    print(block)

heap.free(p)
heap.free(q)
```

How the allocator behaves:

- `malloc(0)` returns `None`. `free(None)` does nothing. `realloc(None, n)`
  works like `malloc(n)`. `realloc(address, 0)` frees the block and returns
  `None`.
- If growing the heap would take it past its limit, `OutOfMemoryError` (a
  subclass of `MemoryError`) is raised. The default limit is 1 MiB.
- Freeing an address that is not the start of an allocated block raises
  `ValueError`.
- `read` and `write` raise `ValueError` for any range that does not lie
  inside a single allocated block.
- `Heap.block_at(address)` returns the `Block` whose data starts at
  `address`. A `Block` has the fields `header`, `size` and `free`, plus the
  properties `address` and `end`.

## Data structures on the simulated heap

- `heapsim.linked_list.LinkedList(heap)` is a singly linked list of ints.
  Each node is a 16-byte heap block that holds the value and a next pointer.
  The list offers `push`, `append`, `delete`, `clear` and iteration.
  `delete(key)` removes the first node that holds `key` and raises `KeyError`
  when no node does. `str()` gives `30 -> 20 -> NULL`.
- `heapsim.matrix.HeapMatrix(heap, rows, cols)` is an int matrix. It is
  stored as a row-pointer table plus one row per `calloc`, so it starts out
  zeroed. `fill()` sets every cell to `row + col`. It also offers `get`,
  `to_lists`, `format` (one line per row, each value followed by a space)
  and `free`. Using the matrix after `free()` raises `ValueError`.
- `heapsim.dynamic_array.DynamicArray(heap, initial_capacity)` is a growable
  int array that lives in one `realloc`'d block. `insert` doubles the
  capacity when the array is full. `remove(index)` raises `IndexError` when
  the index is out of bounds. It halves the capacity once the array holds
  fewer than a quarter of its capacity. `resize(n)` truncates the array when
  `n` is smaller than its length. `free()` resets the array to empty. The
  array supports `len()`, indexing, iteration and the `capacity` property,
  and its `str()` looks like `[10, 30]`.

## Demo commands

```
heapsim-list            # builds a list, prints it, deletes 20, prints it again
heapsim-array           # inserts, removes and resizes a dynamic array
heapsim-matrix 3 4      # prints a zeroed 3x4 matrix, then the same matrix filled with i+j
```

If `heapsim-matrix` gets fewer than two arguments, it reads the row and
column counts from standard input.

## What it does not do

heapsim models an allocator's bookkeeping on a private byte array. It does
not allocate real process memory. It does not replace Python's allocator
and it is not thread-safe. The only programs it provides are the three
demos above.