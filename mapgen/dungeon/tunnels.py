"""Tunnel carving strategies used when joining map areas."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..geometry import Coord, PointLike
from ..grid import SettableGrid
from ..rng import Rng


class TunnelCreator(ABC):
    """Carves a passable path between two positions on a boolean grid.

    Connectors only depend on this interface, so other carving strategies can be
    dropped in without touching the generators that use them.
    """

    @abstractmethod
    def carve(self, grid: SettableGrid, start: PointLike, end: PointLike) -> None:
        """Make ``grid`` contain a contiguous passable path from ``start`` to ``end``."""

    def carve_coords(self, grid: SettableGrid, start_x: int, start_y: int, end_x: int, end_y: int) -> None:
        self.carve(grid, Coord(start_x, start_y), Coord(end_x, end_y))


class HorizontalVerticalTunnelCreator(TunnelCreator):
    """L-shaped tunnels: all horizontal movement then all vertical, or the reverse.

    The order is picked per tunnel with a single ``rng.next_int(2)`` draw.
    Positions are not bounds-checked here; the grid raises for out-of-range cells.
    """

    def __init__(self, rng: Rng):
        if rng is None:
            raise ValueError("HorizontalVerticalTunnelCreator requires an rng")
        self.rng = rng

    def carve(self, grid: SettableGrid, start: PointLike, end: PointLike) -> None:
        sx, sy = start[0], start[1]
        ex, ey = end[0], end[1]
        if self.rng.next_int(2) == 0:
            carve_horizontal(grid, sx, ex, sy)
            carve_vertical(grid, sy, ey, ex)
        else:
            carve_vertical(grid, sy, ey, sx)
            carve_horizontal(grid, sx, ex, ey)


def carve_horizontal(grid: SettableGrid, x_start: int, x_end: int, y: int) -> None:
    for x in range(min(x_start, x_end), max(x_start, x_end) + 1):
        grid[x, y] = True


def carve_vertical(grid: SettableGrid, y_start: int, y_end: int, x: int) -> None:
    for y in range(min(y_start, y_end), max(y_start, y_end) + 1):
        grid[x, y] = True


__all__ = ["TunnelCreator", "HorizontalVerticalTunnelCreator", "carve_horizontal", "carve_vertical"]
