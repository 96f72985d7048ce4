"""Integer grid geometry: positions and axis-aligned rectangles."""

from __future__ import annotations

from typing import Iterator, NamedTuple, Tuple, Union

from .errors import InvalidArgumentError


class Coord(NamedTuple):
    """A grid position. Equal to (and hashes like) the plain ``(x, y)`` tuple."""

    x: int
    y: int


PointLike = Union[Coord, Tuple[int, int]]


class _RectangleFields(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class Rectangle(_RectangleFields):
    """Axis-aligned integer rectangle; cells span ``x .. max_x`` and ``y .. max_y`` inclusive.

    Width and height are never negative; a zero in either makes the rectangle empty.
    """

    __slots__ = ()

    def __new__(cls, x: int, y: int, width: int, height: int) -> "Rectangle":
        if width < 0:
            raise InvalidArgumentError("width", "must be >= 0")
        if height < 0:
            raise InvalidArgumentError("height", "must be >= 0")
        return super().__new__(cls, x, y, width, height)

    @property
    def max_x(self) -> int:
        return self.x + self.width - 1

    @property
    def max_y(self) -> int:
        return self.y + self.height - 1

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def center(self) -> Coord:
        return Coord(self.x + self.width // 2, self.y + self.height // 2)

    def intersects(self, other: "Rectangle") -> bool:
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x <= other.max_x
            and other.x <= self.max_x
            and self.y <= other.max_y
            and other.y <= self.max_y
        )

    def contains(self, item) -> bool:
        """Point or rectangle containment.

        An empty rectangle has no corners, so every rectangle contains it; an empty
        rectangle contains nothing else.
        """
        if isinstance(item, Rectangle):
            if item.is_empty:
                return True
            if self.is_empty:
                return False
            return (
                self.x <= item.x
                and item.max_x <= self.max_x
                and self.y <= item.y
                and item.max_y <= self.max_y
            )
        if self.is_empty:
            return False
        px, py = item
        return self.x <= px <= self.max_x and self.y <= py <= self.max_y

    def positions(self) -> Iterator[Coord]:
        for ix in range(self.x, self.x + self.width):
            for iy in range(self.y, self.y + self.height):
                yield Coord(ix, iy)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}@({self.x}, {self.y})"


Rectangle.EMPTY = Rectangle(0, 0, 0, 0)  # type: ignore[attr-defined]


__all__ = ["Coord", "PointLike", "Rectangle"]
