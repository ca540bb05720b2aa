"""
Implicit Grid Geometry
======================
Lays a fixed-size population out on a near-square grid, row-major.
Index i sits at row = i // columns, col = i % columns.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

# Chebyshev radius of the transmission neighborhood (5 x 5 block)
NEIGHBORHOOD_RADIUS = 2


@dataclass(frozen=True)
class GridGeometry:
    """Derived grid shape for a population of `size` people"""
    size: int
    columns: int
    rows: int

    @classmethod
    def from_size(cls, size: int) -> "GridGeometry":
        """
        Build the geometry for a population

        columns = ceil(sqrt(size)), rows = ceil(size / columns).
        The last row may be partially filled.
        """
        if size < 0:
            raise ValueError(f"Population size must be non-negative, got {size}")
        if size == 0:
            return cls(size=0, columns=0, rows=0)

        columns = math.ceil(math.sqrt(size))
        rows = math.ceil(size / columns)
        return cls(size=size, columns=columns, rows=rows)

    def cell_of(self, index: int) -> Tuple[int, int]:
        """Grid (row, col) of a linear index"""
        return index // self.columns, index % self.columns

    def index_of(self, row: int, col: int) -> int:
        """Linear index of a grid cell"""
        return row * self.columns + col

    def contains(self, row: int, col: int) -> bool:
        """True if (row, col) is on the grid and holds a person"""
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            return False
        return self.index_of(row, col) < self.size

    def neighbors(self, index: int, radius: int = NEIGHBORHOOD_RADIUS) -> Iterator[int]:
        """
        Yield indices of the occupied cells around `index`

        Scans the (2r+1) x (2r+1) block centred on the cell, row by row,
        excluding the cell itself. Cells off the grid or past the
        population size are clipped.
        """
        row, col = self.cell_of(index)
        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                if dr == 0 and dc == 0:
                    continue
                r, c = row + dr, col + dc
                if self.contains(r, c):
                    yield self.index_of(r, c)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def summary(self) -> str:
        """Return grid summary"""
        empty = self.rows * self.columns - self.size
        summary = f"Grid Geometry\n"
        summary += f"=" * 50 + "\n"
        summary += f"Dimensions: {self.rows} x {self.columns}\n"
        summary += f"Population: {self.size}\n"
        summary += f"Empty cells in last row: {empty}\n"
        return summary


if __name__ == "__main__":
    grid = GridGeometry.from_size(100)
    print(grid.summary())
    print(f"Neighbors of index 0: {list(grid.neighbors(0))}")
    print(f"Neighbors of index 55: {len(list(grid.neighbors(55)))}")
