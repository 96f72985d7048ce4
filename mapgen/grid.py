"""Boolean map grids used as generation targets.

``True`` marks a passable cell and ``False`` an impassable one. Cells are stored
column-major (``cells[x][y]``) to match how generation code walks the map.
"""

from __future__ import annotations

from typing import Iterator, List, Protocol, runtime_checkable

from .geometry import Coord


@runtime_checkable
class SettableGrid(Protocol):
    """Anything generation code can read and write by (x, y)."""

    width: int
    height: int

    def __getitem__(self, pos) -> bool: ...

    def __setitem__(self, pos, value: bool) -> None: ...


class ArrayMap:
    """Fixed-size width x height grid backed by nested lists."""

    def __init__(self, width: int, height: int, fill: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[List[bool]] = [[fill] * height for _ in range(width)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        # Negative indices would silently wrap on the backing lists
        if not self.in_bounds(x, y):
            raise IndexError(f"position ({x}, {y}) outside {self.width}x{self.height} grid")

    def get(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self.cells[x][y]

    def set(self, x: int, y: int, value: bool) -> None:
        self._check(x, y)
        self.cells[x][y] = value

    def __getitem__(self, pos) -> bool:
        return self.get(pos[0], pos[1])

    def __setitem__(self, pos, value: bool) -> None:
        self.set(pos[0], pos[1], value)

    def fill(self, value: bool) -> None:
        for column in self.cells:
            for iy in range(self.height):
                column[iy] = value

    def positions(self) -> Iterator[Coord]:
        for ix in range(self.width):
            for iy in range(self.height):
                yield Coord(ix, iy)

    def count(self, value: bool = True) -> int:
        return sum(column.count(value) for column in self.cells)

    def __repr__(self) -> str:
        return f"ArrayMap({self.width}x{self.height}, passable={self.count(True)})"


__all__ = ["SettableGrid", "ArrayMap"]
