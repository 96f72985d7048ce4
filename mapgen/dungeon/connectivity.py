"""Finding and connecting map areas.

``MapAreaFinder`` flood-fills passable cells into one ``MapArea`` per connected
component. ``OrderedMapAreaConnector`` then joins a list of areas by carving a
tunnel from each area to the next, optionally after shuffling the list.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Iterator, List, Optional, Sequence, Tuple

from ..geometry import Coord, PointLike
from ..grid import SettableGrid
from ..logging_utils import get_logger
from ..map_area import MapArea
from ..rng import Rng
from .tunnels import HorizontalVerticalTunnelCreator, TunnelCreator

_log = get_logger("connectivity")

_CARDINAL_DIRS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_DIAGONAL_DIRS = ((1, -1), (1, 1), (-1, 1), (-1, -1))


class AdjacencyRule(Enum):
    """Which neighbouring cells count as adjacent."""

    CARDINALS = _CARDINAL_DIRS
    DIAGONALS = _DIAGONAL_DIRS
    EIGHT_WAY = _CARDINAL_DIRS + _DIAGONAL_DIRS

    @property
    def directions(self) -> Tuple[Tuple[int, int], ...]:
        return self.value

    def neighbors(self, pos: PointLike) -> Iterator[Coord]:
        x, y = pos[0], pos[1]
        for dx, dy in self.value:
            yield Coord(x + dx, y + dy)


class MapAreaFinder:
    def __init__(self, grid: SettableGrid, adjacency_rule: AdjacencyRule = AdjacencyRule.CARDINALS):
        self.grid = grid
        self.adjacency_rule = adjacency_rule

    def map_areas(self) -> List[MapArea]:
        """One MapArea per connected group of passable cells, discovered x-major."""
        w, h = self.grid.width, self.grid.height
        visited = [[False] * h for _ in range(w)]
        areas: List[MapArea] = []
        for x in range(w):
            for y in range(h):
                if visited[x][y] or not self.grid[x, y]:
                    continue
                areas.append(self._flood(x, y, visited))
        return areas

    def _flood(self, sx: int, sy: int, visited: List[List[bool]]) -> MapArea:
        w, h = self.grid.width, self.grid.height
        area = MapArea()
        q: Deque[Coord] = deque([Coord(sx, sy)])
        visited[sx][sy] = True
        while q:
            cur = q.popleft()
            area.add(cur)
            for nx, ny in self.adjacency_rule.neighbors(cur):
                if 0 <= nx < w and 0 <= ny < h and not visited[nx][ny] and self.grid[nx, ny]:
                    visited[nx][ny] = True
                    q.append(Coord(nx, ny))
        return area


class CenterBoundsConnectionPointSelector:
    """Connects areas through the centers of their bounding rectangles."""

    def select(self, area1: MapArea, area2: MapArea) -> Tuple[Coord, Coord]:
        return area1.bounds.center, area2.bounds.center


class OrderedMapAreaConnector:
    @staticmethod
    def connect(
        grid: SettableGrid,
        areas: Optional[Sequence[MapArea]] = None,
        tunnel_creator: Optional[TunnelCreator] = None,
        adjacency_rule: AdjacencyRule = AdjacencyRule.CARDINALS,
        point_selector: Optional[CenterBoundsConnectionPointSelector] = None,
        rng: Optional[Rng] = None,
        randomize_order: bool = True,
    ) -> int:
        """Carve a tunnel between each consecutive pair of areas; return how many were carved.

        When ``areas`` is None the passable regions of ``grid`` are found with
        ``MapAreaFinder`` using ``adjacency_rule``. The caller's sequence is never
        reordered in place.
        """
        if (randomize_order or tunnel_creator is None) and rng is None:
            raise ValueError("rng is required to shuffle areas or build the default tunnel creator")
        if areas is None:
            areas = MapAreaFinder(grid, adjacency_rule).map_areas()
        ordered = list(areas)
        if randomize_order:
            fisher_yates_shuffle(ordered, rng)
        if tunnel_creator is None:
            tunnel_creator = HorizontalVerticalTunnelCreator(rng)
        if point_selector is None:
            point_selector = CenterBoundsConnectionPointSelector()

        carved = 0
        for i in range(1, len(ordered)):
            start, end = point_selector.select(ordered[i - 1], ordered[i])
            tunnel_creator.carve(grid, start, end)
            carved += 1
        _log.debug(event="areas_connected", areas=len(ordered), tunnels=carved)
        return carved


def fisher_yates_shuffle(items: List, rng: Rng) -> None:
    for i in range(len(items) - 1, 0, -1):
        j = rng.next_int(i + 1)
        items[i], items[j] = items[j], items[i]


__all__ = [
    "AdjacencyRule",
    "MapAreaFinder",
    "CenterBoundsConnectionPointSelector",
    "OrderedMapAreaConnector",
    "fisher_yates_shuffle",
]
