"""Dungeon generation: random rooms, tunnels, area connection and distance maps."""

from .config import RoomsConfig
from .connectivity import (
    AdjacencyRule,
    CenterBoundsConnectionPointSelector,
    MapAreaFinder,
    OrderedMapAreaConnector,
)
from .metrics import init_metrics
from .pathing import GoalMap
from .rooms import generate, generate_from_config, room_interior
from .tunnels import HorizontalVerticalTunnelCreator, TunnelCreator

__all__ = [
    "RoomsConfig",
    "AdjacencyRule",
    "CenterBoundsConnectionPointSelector",
    "MapAreaFinder",
    "OrderedMapAreaConnector",
    "init_metrics",
    "GoalMap",
    "generate",
    "generate_from_config",
    "room_interior",
    "HorizontalVerticalTunnelCreator",
    "TunnelCreator",
]
