"""Random rooms generation.

Tries to place ``max_rooms`` rectangular rooms of random size at random
positions. A room whose position overlaps an already accepted room is
repositioned (its size is kept) up to ``attempts_per_room`` times in total and
then discarded without error, so fewer rooms than requested is a normal
outcome. After generation passable cells are ``True`` and everything else is
``False``.

Room sizes are interior sizes; each room rectangle also carries a one-cell wall
border, so accepted rectangles never share a cell but their interiors are
always separated by at least two wall cells.

Every cell value may be written more than once, so an in-memory grid such as
``ArrayMap`` is the intended target.
"""

from __future__ import annotations

import time
from typing import Dict, List, Optional

from ..errors import InvalidArgumentError
from ..geometry import Rectangle
from ..grid import SettableGrid
from ..logging_utils import get_logger
from ..map_area import MapArea
from ..rng import Rng, resolve_rng
from .config import RoomsConfig
from .connectivity import AdjacencyRule, CenterBoundsConnectionPointSelector, OrderedMapAreaConnector
from .tunnels import HorizontalVerticalTunnelCreator

_log = get_logger("rooms")

WALL_PADDING = 2


def validate_arguments(
    width: int,
    height: int,
    max_rooms: int,
    room_min_size: int,
    room_max_size: int,
    attempts_per_room: int,
) -> None:
    if max_rooms <= 0:
        raise InvalidArgumentError("max_rooms", "max_rooms must be greater than 0.")
    if room_min_size <= 0:
        raise InvalidArgumentError("room_min_size", "room_min_size must be greater than 0.")
    if room_max_size < room_min_size:
        raise InvalidArgumentError("room_max_size", "room_max_size must be greater than or equal to room_min_size.")
    if attempts_per_room <= 0:
        raise InvalidArgumentError("attempts_per_room", "attempts_per_room must be greater than 0.")
    if room_max_size + WALL_PADDING > width or room_max_size + WALL_PADDING > height:
        raise InvalidArgumentError(
            "room_max_size",
            f"room_max_size plus walls must fit in the {width}x{height} map.",
        )


def generate(
    grid: SettableGrid,
    max_rooms: int,
    room_min_size: int,
    room_max_size: int,
    attempts_per_room: int,
    rng: Optional[Rng] = None,
    connect_using_default: bool = True,
    *,
    seed: Optional[int] = None,
    metrics: Optional[Dict[str, float]] = None,
) -> List[Rectangle]:
    """Generate rooms onto ``grid`` and return the accepted room rectangles.

    ``rng`` (or, failing that, a ``seed``) drives every size and position draw.
    When ``connect_using_default`` is set the rooms are joined in random order by
    ``OrderedMapAreaConnector`` with L-shaped tunnels between room centers.

    Returned rectangles include the wall border and are in placement order; their
    number is at most ``max_rooms``. ``metrics``, if given, is updated in place
    with the keys from ``init_metrics``.
    """
    validate_arguments(grid.width, grid.height, max_rooms, room_min_size, room_max_size, attempts_per_room)
    rng = resolve_rng(rng, seed)
    if rng is None:
        raise InvalidArgumentError("rng", "an rng or a seed must be provided.")

    started = time.perf_counter()

    # Sizes given are interior sizes
    room_min_size += WALL_PADDING
    room_max_size += WALL_PADDING

    for x in range(grid.width):
        for y in range(grid.height):
            grid[x, y] = False

    rooms: List[Rectangle] = []
    attempts_total = 0
    for r in range(max_rooms):
        room_width = rng.next_int(room_min_size, room_max_size)
        room_height = rng.next_int(room_min_size, room_max_size)

        new_room = _random_position(grid, room_width, room_height, rng)
        intersects = _overlaps(new_room, rooms)
        position_attempts = 1
        while intersects and position_attempts < attempts_per_room:
            new_room = _random_position(grid, room_width, room_height, rng)
            intersects = _overlaps(new_room, rooms)
            position_attempts += 1
        attempts_total += position_attempts

        if intersects:
            if _log.is_enabled("debug"):
                _log.debug(event="room_dropped", index=r, width=room_width, height=room_height, attempts=position_attempts)
            continue
        rooms.append(new_room)

    for room in rooms:
        _carve_room(grid, room)

    tunnels = 0
    if connect_using_default:
        tunnels = OrderedMapAreaConnector.connect(
            grid,
            [room_interior(room) for room in rooms],
            HorizontalVerticalTunnelCreator(rng),
            AdjacencyRule.CARDINALS,
            CenterBoundsConnectionPointSelector(),
            rng=rng,
        )

    if _log.is_enabled("debug"):
        _log.debug(event="rooms_generated", requested=max_rooms, placed=len(rooms), tunnels=tunnels)
    if metrics is not None:
        metrics["rooms_requested"] = max_rooms
        metrics["rooms_placed"] = len(rooms)
        metrics["rooms_dropped"] = max_rooms - len(rooms)
        metrics["placement_attempts"] = attempts_total
        metrics["tunnels_carved"] = tunnels
        metrics["runtime_ms"] = (time.perf_counter() - started) * 1000
    return rooms


def generate_from_config(
    grid: SettableGrid,
    config: RoomsConfig,
    rng: Optional[Rng] = None,
    metrics: Optional[Dict[str, float]] = None,
) -> List[Rectangle]:
    return generate(
        grid,
        config.max_rooms,
        config.room_min_size,
        config.room_max_size,
        config.attempts_per_room,
        rng,
        config.connect,
        seed=config.seed,
        metrics=metrics,
    )


def room_interior(room: Rectangle) -> MapArea:
    """Passable cells of a wall-bordered room rectangle."""
    area = MapArea()
    for x in range(room.x + 1, room.max_x):
        for y in range(room.y + 1, room.max_y):
            area.add((x, y))
    return area


def _random_position(grid: SettableGrid, room_width: int, room_height: int, rng: Rng) -> Rectangle:
    x = rng.next_int(grid.width - room_width)
    y = rng.next_int(grid.height - room_height)
    return Rectangle(x, y, room_width, room_height)


def _overlaps(room: Rectangle, existing: List[Rectangle]) -> bool:
    return any(room.intersects(other) for other in existing)


def _carve_room(grid: SettableGrid, room: Rectangle) -> None:
    # max edges are excluded by the range end, min edges by the +1
    for x in range(room.x + 1, room.max_x):
        for y in range(room.y + 1, room.max_y):
            grid[x, y] = True


__all__ = ["generate", "generate_from_config", "room_interior", "validate_arguments", "WALL_PADDING"]
