"""Error types raised by map generation validation."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A generation parameter failed up-front validation.

    ``param`` names the offending argument so callers (and the CLI) can report it.
    """

    def __init__(self, param: str, message: str):
        super().__init__(f"{param}: {message}")
        self.param = param
        self.message = message


__all__ = ["InvalidArgumentError"]
