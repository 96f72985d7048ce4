from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        "rooms_requested": 0,
        "rooms_placed": 0,
        "rooms_dropped": 0,
        "placement_attempts": 0,
        "tunnels_carved": 0,
        "runtime_ms": 0.0,
    }


__all__ = ["init_metrics"]
