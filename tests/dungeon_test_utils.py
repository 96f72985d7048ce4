from collections import deque

CARDINALS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def passable_cells(grid):
    return {(x, y) for x in range(grid.width) for y in range(grid.height) if grid[x, y]}


def interior_cells(room):
    """Cells strictly inside a wall-bordered room rectangle."""
    return {(x, y) for x in range(room.x + 1, room.x + room.width - 1) for y in range(room.y + 1, room.y + room.height - 1)}


def bfs_reachable(grid, start):
    """Return set of (x,y) passable tiles reachable from start over cardinal moves."""
    if start is None or not grid[start]:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in CARDINALS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < grid.width and 0 <= ny < grid.height and (nx, ny) not in vis and grid[nx, ny]:
                vis.add((nx, ny))
                q.append((nx, ny))
    return vis


class ScriptedRng:
    """Rng that replays a fixed list of draws and records each call's arguments."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def next_int(self, low_or_upper, upper=None):
        self.calls.append((low_or_upper, upper))
        return self.values.pop(0)
