"""An integer matrix laid out as a table of row pointers on a simulated heap."""

from __future__ import annotations

import argparse
import sys

from heapsim.heap import INT_SIZE, Heap

POINTER_SIZE = 8
_NULL = 0


class HeapMatrix:
    """A ``rows`` by ``cols`` matrix of zeroed integers allocated with calloc."""

    def __init__(self, heap: Heap, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must not be negative: {rows}x{cols}")
        self.heap = heap
        self.rows = rows
        self.cols = cols
        self._freed = False
        self._table = heap.calloc(rows, POINTER_SIZE)
        for row in range(rows):
            self._set_row(row, heap.calloc(cols, INT_SIZE))

    def _set_row(self, row: int, address: int | None) -> None:
        pointer = (address or _NULL).to_bytes(POINTER_SIZE, "little")
        self.heap.write(self._table + row * POINTER_SIZE, pointer)

    def _row(self, row: int) -> int | None:
        raw = self.heap.read(self._table + row * POINTER_SIZE, POINTER_SIZE)
        return int.from_bytes(raw, "little") or None

    def _check_live(self) -> None:
        if self._freed:
            raise ValueError("matrix has been freed")

    def _cell(self, row: int, col: int) -> int:
        self._check_live()
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} matrix")
        return self._row(row) + col * INT_SIZE

    def fill(self) -> None:
        """Set every cell to the sum of its row and column index."""
        for row in range(self.rows):
            for col in range(self.cols):
                self.heap.write_int(self._cell(row, col), row + col)

    def get(self, row: int, col: int) -> int:
        """Return the value stored at ``(row, col)``."""
        return self.heap.read_int(self._cell(row, col))

    def to_lists(self) -> list[list[int]]:
        """Return the matrix contents as a list of rows."""
        self._check_live()
        return [
            [self.get(row, col) for col in range(self.cols)]
            for row in range(self.rows)
        ]

    def format(self) -> str:
        """Render each row as space-terminated values on its own line."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.to_lists()
        )

    def free(self) -> None:
        """Release every row and then the row table."""
        self._check_live()
        for row in range(self.rows):
            self.heap.free(self._row(row))
        self.heap.free(self._table)
        self._table = None
        self._freed = True


def main(argv: list[str] | None = None) -> int:
    """Read a size, print a zeroed matrix, fill it and print it again."""
    parser = argparse.ArgumentParser(
        description="Show a matrix stored on a simulated heap."
    )
    parser.add_argument("rows", type=int, nargs="?")
    parser.add_argument("cols", type=int, nargs="?")
    args = parser.parse_args(argv)

    rows, cols = args.rows, args.cols
    if rows is None or cols is None:
        tokens = sys.stdin.read().split()
        if len(tokens) < 2:
            parser.error("expected the number of rows and columns")
        try:
            rows, cols = int(tokens[0]), int(tokens[1])
        except ValueError:
            parser.error("rows and columns must be integers")

    matrix = HeapMatrix(Heap(), rows, cols)
    print(matrix.format(), end="")
    matrix.fill()
    print(matrix.format(), end="")
    matrix.free()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())