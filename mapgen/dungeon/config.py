import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from dotenv import load_dotenv

from ..errors import InvalidArgumentError

_ENV_PREFIX = "MAPGEN_"
_FALSEY = {"0", "false", "no", ""}


@dataclass
class RoomsConfig:
    width: int = 80
    height: int = 50
    max_rooms: int = 20
    room_min_size: int = 3
    room_max_size: int = 9
    attempts_per_room: int = 10
    connect: bool = True
    seed: Optional[int] = None

    def validate(self) -> "RoomsConfig":
        """Apply the generator's argument rules against this config's own grid size."""
        from .rooms import validate_arguments

        if self.width <= 0:
            raise InvalidArgumentError("width", "width must be greater than 0.")
        if self.height <= 0:
            raise InvalidArgumentError("height", "height must be greater than 0.")
        validate_arguments(
            self.width,
            self.height,
            self.max_rooms,
            self.room_min_size,
            self.room_max_size,
            self.attempts_per_room,
        )
        return self

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "RoomsConfig":
        """Build a config from ``MAPGEN_*`` variables, after loading ``env_file`` (or ./.env).

        Keyword overrides that are not None take precedence over the environment.
        Variables already present in the process environment are not replaced by
        the file.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()
        cfg = cls()
        for f in fields(cls):
            raw = os.getenv(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            setattr(cfg, f.name, _coerce(f.name, raw))
        explicit = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(explicit) - {f.name for f in fields(cls)}
        if unknown:
            raise InvalidArgumentError(sorted(unknown)[0], "unknown RoomsConfig field")
        return replace(cfg, **explicit)


def _coerce(name: str, raw: str):
    if name == "connect":
        return raw.strip().lower() not in _FALSEY
    if name == "seed" and raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(name, f"expected an integer, got {raw!r}") from None


__all__ = ["RoomsConfig"]
