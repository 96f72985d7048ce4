"""Arbitrarily shaped areas of a map.

A ``MapArea`` stores each unique position considered part of the area in the
order it was added, alongside a set used for membership tests, and keeps its
bounding rectangle up to date as positions are added.

Set algebra (``intersection``/``union``/``contains``/``intersects``) always runs
a cheap bounds check first and then iterates the smaller of the two areas
against the larger one's set.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .geometry import Coord, PointLike, Rectangle

_HIGH = sys.maxsize
_LOW = -sys.maxsize - 1


class MapArea:
    __slots__ = ("_positions", "_positions_set", "_left", "_top", "_right", "_bottom")

    def __init__(self, positions: Optional[Iterable[PointLike]] = None):
        self._positions: List[Coord] = []
        self._positions_set: Set[Coord] = set()
        # right < left marks an empty area
        self._left = _HIGH
        self._top = _HIGH
        self._right = _LOW
        self._bottom = _LOW
        if positions is not None:
            for pos in positions:
                self.add(pos)

    @property
    def bounds(self) -> Rectangle:
        """Smallest rectangle enclosing every position (``Rectangle.EMPTY`` when empty)."""
        if self._right < self._left:
            return Rectangle.EMPTY  # type: ignore[attr-defined]
        return Rectangle(self._left, self._top, self._right - self._left + 1, self._bottom - self._top + 1)

    @property
    def count(self) -> int:
        return len(self._positions)

    @property
    def positions(self) -> Tuple[Coord, ...]:
        return tuple(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._positions)

    def add(self, item) -> None:
        """Add a position, or every position of another MapArea.

        Adding a position already present does nothing. Average O(1) per position.
        """
        if isinstance(item, MapArea):
            for pos in item._positions:
                self._add_position(pos)
            return
        self._add_position(item)

    def _add_position(self, position: PointLike) -> None:
        pos = Coord(position[0], position[1])
        if pos in self._positions_set:
            return
        self._positions_set.add(pos)
        self._positions.append(pos)

        if pos.x > self._right:
            self._right = pos.x
        if pos.x < self._left:
            self._left = pos.x
        if pos.y > self._bottom:
            self._bottom = pos.y
        if pos.y < self._top:
            self._top = pos.y

    def contains(self, item) -> bool:
        """Membership for a position; full containment for another MapArea."""
        if isinstance(item, MapArea):
            if not self.bounds.contains(item.bounds):
                return False
            return all(pos in self._positions_set for pos in item._positions)
        return (item[0], item[1]) in self._positions_set

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def intersects(self, other: "MapArea") -> bool:
        """True if at least one position is shared.

        If the actual shared positions are needed, call ``MapArea.intersection``
        and check its count instead.
        """
        if not other.bounds.intersects(self.bounds):
            return False
        smaller, larger = (self, other) if self.count <= other.count else (other, self)
        return any(pos in larger._positions_set for pos in smaller._positions)

    @staticmethod
    def intersection(area1: "MapArea", area2: "MapArea") -> "MapArea":
        """New MapArea holding exactly the positions present in both areas."""
        result = MapArea()
        if not area1.bounds.intersects(area2.bounds):
            return result

        if area1.count > area2.count:
            area1, area2 = area2, area1

        for pos in area1._positions:
            if pos in area2._positions_set:
                result._add_position(pos)
        return result

    @staticmethod
    def union(area1: "MapArea", area2: "MapArea") -> "MapArea":
        """New MapArea holding every position in one or both areas."""
        result = MapArea()
        result.add(area1)
        result.add(area2)
        return result

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, MapArea):
            return NotImplemented
        if self.count != other.count:
            return False
        return all(pos in other._positions_set for pos in self._positions)

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Mutable with value equality
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "[" + ", ".join(f"({p.x}, {p.y})" for p in self._positions) + "]"


__all__ = ["MapArea"]
