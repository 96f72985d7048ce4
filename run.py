"""mapgen CLI entry point.

Generates random-rooms maps and reports statistics about the result. Accepts
configuration via flags and MAPGEN_* environment variables, with optional .env
loading. No map is printed; output is a summary banner or a JSON record.

Run `python run.py --help` for details.
"""

import argparse
import json
import random
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console

from mapgen import ArrayMap, InvalidArgumentError, MapAreaFinder, RoomsConfig, __version__
from mapgen.dungeon import generate_from_config, init_metrics
from mapgen.logging_utils import log

just_fix_windows_console()
_COLOR_ENABLED = sys.stdout.isatty()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    mapgen random-rooms generator

    Place non-overlapping rectangular rooms on a boolean grid, optionally join
    them with L-shaped tunnels, and report what was produced. Configuration can
    be provided via CLI flags or environment variables. If both are present,
    CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAPGEN_WIDTH / MAPGEN_HEIGHT     Map size (default: 80x50)
          MAPGEN_MAX_ROOMS                 Rooms to attempt (default: 20)
          MAPGEN_ROOM_MIN_SIZE             Minimum interior size (default: 3)
          MAPGEN_ROOM_MAX_SIZE             Maximum interior size (default: 9)
          MAPGEN_ATTEMPTS_PER_ROOM         Position attempts per room (default: 10)
          MAPGEN_CONNECT                   0/false/no disables tunnels (default: on)
          MAPGEN_SEED                      RNG seed (default: random)
          MAPGEN_LOG_LEVEL, MAPGEN_LOG_JSON  Logging controls

        Examples:
          # Generate with defaults and a fixed seed
          python run.py generate --seed 42

          # Small map, many rooms, no tunnels, JSON output
          python run.py generate --width 30 --height 20 --max-rooms 50 --no-connect --json

          # List connected areas of an unconnected map
          python run.py areas --seed 7
        """
    )

    parser = argparse.ArgumentParser(
        prog="mapgen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"mapgen {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a map and print statistics",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_generation_flags(gen_parser)
    gen_parser.add_argument("--json", action="store_true", help="Print a JSON record instead of the banner")
    gen_parser.set_defaults(command="generate")

    areas_parser = subparsers.add_parser(
        "areas",
        help="Generate a map and list its connected passable areas",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_generation_flags(areas_parser)
    areas_parser.set_defaults(command="areas")

    if len(argv) == 0:
        argv = ["generate"]
    return parser.parse_args(argv)


def _add_generation_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, default=None, help="Map width (default: env MAPGEN_WIDTH or 80)")
    p.add_argument("--height", type=int, default=None, help="Map height (default: env MAPGEN_HEIGHT or 50)")
    p.add_argument("--max-rooms", dest="max_rooms", type=int, default=None, help="Rooms to attempt")
    p.add_argument("--min-size", dest="room_min_size", type=int, default=None, help="Minimum room interior size")
    p.add_argument("--max-size", dest="room_max_size", type=int, default=None, help="Maximum room interior size")
    p.add_argument("--attempts", dest="attempts_per_room", type=int, default=None, help="Position attempts per room")
    p.add_argument("--seed", type=int, default=None, help="RNG seed (default: env MAPGEN_SEED or random)")
    p.add_argument(
        "--no-connect",
        dest="connect",
        action="store_const",
        const=False,
        default=None,
        help="Skip tunnel carving between rooms",
    )


_CONFIG_FLAGS = (
    "width",
    "height",
    "max_rooms",
    "room_min_size",
    "room_max_size",
    "attempts_per_room",
    "connect",
    "seed",
)


def build_config(args: argparse.Namespace) -> RoomsConfig:
    cfg = RoomsConfig.from_env(
        getattr(args, "env_file", None),
        **{name: getattr(args, name, None) for name in _CONFIG_FLAGS},
    )
    if cfg.seed is None:
        cfg.seed = _fresh_seed()
    return cfg.validate()


def _fresh_seed() -> int:
    return random.SystemRandom().randint(1, 1_000_000)


def run_generation(cfg: RoomsConfig):
    grid = ArrayMap(cfg.width, cfg.height)
    metrics = init_metrics()
    rooms = generate_from_config(grid, cfg, metrics=metrics)
    areas = MapAreaFinder(grid).map_areas()
    return grid, rooms, areas, metrics


def label(text: str) -> str:
    return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def value(val) -> str:
    return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    mode = (getattr(args, "command", None) or "generate").lower()
    try:
        cfg = build_config(args)
    except InvalidArgumentError as e:
        log.error(event="invalid_argument", param=e.param, message=e.message)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    grid, rooms, areas, metrics = run_generation(cfg)
    log.debug(event="generated", mode=mode, seed=cfg.seed, rooms=len(rooms), areas=len(areas))

    if mode == "areas":
        for i, area in enumerate(sorted(areas, key=len, reverse=True)):
            print(f"area {i}: cells={len(area)} bounds={area.bounds}")
        return 0

    if getattr(args, "json", False):
        record = {
            "seed": cfg.seed,
            "width": cfg.width,
            "height": cfg.height,
            "rooms": [list(r) for r in rooms],
            "passable_cells": grid.count(True),
            "areas": len(areas),
            "metrics": metrics,
        }
        print(json.dumps(record, indent=2))
        return 0

    title = f"{Fore.CYAN}{Style.BRIGHT}Random Rooms{Style.RESET_ALL}" if _COLOR_ENABLED else "Random Rooms"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Seed:'):12} {value(cfg.seed)}",
        f"  {label('Map:'):12} {value(f'{cfg.width}x{cfg.height}')}",
        f"  {label('Rooms:'):12} {value(f'{len(rooms)} of {cfg.max_rooms}')}",
        f"  {label('Tunnels:'):12} {value(metrics['tunnels_carved'])}",
        f"  {label('Passable:'):12} {value(grid.count(True))}",
        f"  {label('Areas:'):12} {value(len(areas))}",
        f"  {label('Time (ms):'):12} {value(round(metrics['runtime_ms'], 2))}",
        divider,
    ]
    print("\n".join(lines))
    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
