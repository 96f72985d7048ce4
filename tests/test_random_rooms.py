import unittest

import pytest

from mapgen import ArrayMap, InvalidArgumentError, MapAreaFinder, Rectangle, RoomsConfig, SeededRng
from mapgen.dungeon import generate, generate_from_config, init_metrics, room_interior
from tests.dungeon_test_utils import ScriptedRng, bfs_reachable, interior_cells, passable_cells


def _assert_layout(grid, rooms):
    for i, a in enumerate(rooms):
        assert 0 <= a.x and a.max_x < grid.width
        assert 0 <= a.y and a.max_y < grid.height
        for b in rooms[i + 1 :]:
            assert not a.intersects(b), f"{a} overlaps {b}"
    expected = set()
    for room in rooms:
        expected |= interior_cells(room)
    assert passable_cells(grid) == expected


def test_single_fixed_size_room():
    grid = ArrayMap(20, 20)
    rooms = generate(grid, 1, 3, 3, 1, SeededRng(7), connect_using_default=False)
    assert len(rooms) == 1
    room = rooms[0]
    assert (room.width, room.height) == (5, 5)
    assert len(passable_cells(grid)) == 9
    _assert_layout(grid, rooms)


def test_draw_order_and_interior_geometry():
    rng = ScriptedRng([5, 5, 2, 3])
    grid = ArrayMap(20, 20)
    rooms = generate(grid, 1, 3, 3, 1, rng, connect_using_default=False)
    assert rooms == [Rectangle(2, 3, 5, 5)]
    # width, height, then x and y bounded so the room fits
    assert rng.calls == [(5, 5), (5, 5), (15, None), (15, None)]
    assert passable_cells(grid) == {(x, y) for x in range(3, 6) for y in range(4, 7)}


def test_retry_redraws_position_only():
    rng = ScriptedRng([5, 5, 0, 0, 5, 5, 0, 0, 2, 2, 10, 10])
    grid = ArrayMap(20, 20)
    rooms = generate(grid, 2, 3, 3, 3, rng, connect_using_default=False)
    assert rooms == [Rectangle(0, 0, 5, 5), Rectangle(10, 10, 5, 5)]
    assert rng.values == []
    assert len(rng.calls) == 12


def test_room_dropped_after_attempts_exhausted():
    rng = ScriptedRng([5, 5, 0, 0, 5, 5, 0, 0, 1, 1])
    metrics = init_metrics()
    grid = ArrayMap(20, 20)
    rooms = generate(grid, 2, 3, 3, 2, rng, connect_using_default=False, metrics=metrics)
    assert rooms == [Rectangle(0, 0, 5, 5)]
    assert metrics["rooms_requested"] == 2
    assert metrics["rooms_placed"] == 1
    assert metrics["rooms_dropped"] == 1
    assert metrics["placement_attempts"] == 3
    assert metrics["tunnels_carved"] == 0


def test_room_filling_whole_map():
    grid = ArrayMap(5, 5)
    rooms = generate(grid, 1, 3, 3, 1, SeededRng(1), connect_using_default=False)
    assert rooms == [Rectangle(0, 0, 5, 5)]


def test_crowded_map_places_fewer_rooms():
    grid = ArrayMap(12, 12)
    rooms = generate(grid, 50, 2, 3, 1, SeededRng(3), connect_using_default=False)
    assert 0 < len(rooms) < 50
    _assert_layout(grid, rooms)


@pytest.mark.parametrize("seed", range(20))
def test_unconnected_layout_invariants(seed):
    grid = ArrayMap(40, 30, fill=True)
    rooms = generate(grid, 12, 3, 7, 5, SeededRng(seed), connect_using_default=False)
    assert len(rooms) <= 12
    _assert_layout(grid, rooms)


@pytest.mark.parametrize("seed", range(10))
def test_connected_rooms_form_one_area(seed):
    grid = ArrayMap(60, 40)
    rooms = generate(grid, 10, 3, 8, 10, SeededRng(seed))
    assert rooms
    passable = passable_cells(grid)
    for room in rooms:
        assert interior_cells(room) <= passable
    assert len(MapAreaFinder(grid).map_areas()) == 1
    start = rooms[0].center
    assert bfs_reachable(grid, start) == passable


def test_same_seed_same_map():
    a, b = ArrayMap(50, 50), ArrayMap(50, 50)
    rooms_a = generate(a, 15, 3, 9, 10, seed=2024)
    rooms_b = generate(b, 15, 3, 9, 10, seed=2024)
    assert rooms_a == rooms_b
    assert passable_cells(a) == passable_cells(b)


def test_generate_from_config_uses_config_seed():
    cfg = RoomsConfig(width=40, height=40, max_rooms=8, seed=77, connect=False)
    a, b = ArrayMap(40, 40), ArrayMap(40, 40)
    assert generate_from_config(a, cfg) == generate(b, 8, 3, 9, 10, SeededRng(77), False)
    assert passable_cells(a) == passable_cells(b)


def test_room_interior_area():
    area = room_interior(Rectangle(2, 2, 5, 4))
    assert area.count == 6
    assert area.bounds == Rectangle(3, 3, 3, 2)


def test_debug_log_reports_dropped_rooms(capsys):
    from mapgen import logging_utils

    logging_utils.configure(level="debug", json_mode=False)
    try:
        generate(ArrayMap(20, 20), 2, 3, 3, 2, ScriptedRng([5, 5, 0, 0, 5, 5, 0, 0, 1, 1]), False)
    finally:
        logging_utils.configure()
    out = capsys.readouterr().out
    assert "event=room_dropped" in out
    assert "event=rooms_generated" in out


def test_room_logs_suppressed_above_debug(capsys):
    from mapgen import logging_utils

    logging_utils.configure(level="info", json_mode=False)
    try:
        generate(ArrayMap(20, 20), 2, 3, 3, 2, ScriptedRng([5, 5, 0, 0, 5, 5, 0, 0, 1, 1]), False)
    finally:
        logging_utils.configure()
    out = capsys.readouterr().out
    assert "room_dropped" not in out
    assert "rooms_generated" not in out


class TestValidation(unittest.TestCase):
    def setUp(self):
        self.grid = ArrayMap(20, 20)
        for x in range(20):
            self.grid[x, x] = True
        self.before = passable_cells(self.grid)

    def _assert_rejected(self, param, *args, **kwargs):
        with self.assertRaises(InvalidArgumentError) as ctx:
            generate(self.grid, *args, **kwargs)
        self.assertEqual(ctx.exception.param, param)
        self.assertEqual(passable_cells(self.grid), self.before, "grid mutated before validation failed")

    def test_max_rooms(self):
        self._assert_rejected("max_rooms", 0, 3, 5, 5, SeededRng(1))

    def test_room_min_size(self):
        self._assert_rejected("room_min_size", 5, 0, 5, 5, SeededRng(1))

    def test_room_max_size_below_min(self):
        self._assert_rejected("room_max_size", 5, 4, 3, 5, SeededRng(1))

    def test_attempts_per_room(self):
        self._assert_rejected("attempts_per_room", 5, 3, 5, 0, SeededRng(1))

    def test_room_max_size_too_large_for_map(self):
        self._assert_rejected("room_max_size", 5, 3, 19, 5, SeededRng(1))

    def test_missing_rng_and_seed(self):
        self._assert_rejected("rng", 5, 3, 5, 5)

    def test_invalid_argument_is_value_error(self):
        with self.assertRaises(ValueError):
            generate(self.grid, -1, 3, 5, 5, SeededRng(1))


if __name__ == "__main__":
    unittest.main()
