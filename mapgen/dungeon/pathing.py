"""Multi-goal distance maps.

A ``GoalMap`` holds, for every passable cell, the number of steps to the
nearest goal. It is recomputed from scratch by ``calculate()``, so repeated
calls with an unchanged grid and goal set produce the same field.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Set

from ..geometry import Coord
from ..grid import SettableGrid
from .connectivity import AdjacencyRule


class GoalMap:
    def __init__(self, grid: SettableGrid, adjacency_rule: AdjacencyRule = AdjacencyRule.CARDINALS):
        self.grid = grid
        self.adjacency_rule = adjacency_rule
        self.goals: Set[Coord] = set()
        self._distances: List[List[Optional[int]]] = self._blank()

    def _blank(self) -> List[List[Optional[int]]]:
        return [[None] * self.grid.height for _ in range(self.grid.width)]

    def add_goal(self, x: int, y: int) -> None:
        self.goals.add(Coord(x, y))

    def remove_goal(self, x: int, y: int) -> None:
        self.goals.discard(Coord(x, y))

    def clear_goals(self) -> None:
        self.goals.clear()

    def calculate(self) -> None:
        w, h = self.grid.width, self.grid.height
        dist = self._blank()
        q: Deque[Coord] = deque()
        # sorted so tie-breaking never depends on set order
        for goal in sorted(self.goals):
            if 0 <= goal.x < w and 0 <= goal.y < h and self.grid[goal] and dist[goal.x][goal.y] is None:
                dist[goal.x][goal.y] = 0
                q.append(goal)
        while q:
            cur = q.popleft()
            step = dist[cur.x][cur.y] + 1
            for nx, ny in self.adjacency_rule.neighbors(cur):
                if 0 <= nx < w and 0 <= ny < h and dist[nx][ny] is None and self.grid[nx, ny]:
                    dist[nx][ny] = step
                    q.append(Coord(nx, ny))
        self._distances = dist

    def distance(self, x: int, y: int) -> Optional[int]:
        """Steps to the nearest goal as of the last ``calculate()``; None if unreachable."""
        if not (0 <= x < self.grid.width and 0 <= y < self.grid.height):
            raise IndexError(f"position ({x}, {y}) outside {self.grid.width}x{self.grid.height} grid")
        return self._distances[x][y]

    def __getitem__(self, pos) -> Optional[int]:
        return self.distance(pos[0], pos[1])


__all__ = ["GoalMap"]
