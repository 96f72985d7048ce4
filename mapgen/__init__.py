"""mapgen: random-rooms dungeon generation over boolean grids.

Public surface:
    ArrayMap, SettableGrid         boolean grids (True = passable)
    Coord, Rectangle               grid geometry
    MapArea                        ordered, duplicate-free position sets with bounds
    SeededRng, Rng                 explicit random sources
    InvalidArgumentError           raised by up-front validation
    generate, RoomsConfig, ...     see ``mapgen.dungeon``
"""

from .dungeon import (
    AdjacencyRule,
    CenterBoundsConnectionPointSelector,
    GoalMap,
    HorizontalVerticalTunnelCreator,
    MapAreaFinder,
    OrderedMapAreaConnector,
    RoomsConfig,
    TunnelCreator,
    generate,
    generate_from_config,
    init_metrics,
    room_interior,
)
from .errors import InvalidArgumentError
from .geometry import Coord, Rectangle
from .grid import ArrayMap, SettableGrid
from .map_area import MapArea
from .rng import Rng, SeededRng

__version__ = "0.1.0"

__all__ = [
    "AdjacencyRule",
    "ArrayMap",
    "CenterBoundsConnectionPointSelector",
    "Coord",
    "GoalMap",
    "HorizontalVerticalTunnelCreator",
    "InvalidArgumentError",
    "MapArea",
    "MapAreaFinder",
    "OrderedMapAreaConnector",
    "Rectangle",
    "Rng",
    "RoomsConfig",
    "SeededRng",
    "SettableGrid",
    "TunnelCreator",
    "generate",
    "generate_from_config",
    "init_metrics",
    "room_interior",
]
