"""Player command vocabulary shared by input, controllers, and systems."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    START = "V"
    ENGINES_ON = "W"
    ENGINES_OFF = "S"
    BURN_LEFT = "Y"
    BURN_RIGHT = "Z"
    DRIFT = "X"
    RADAR = "R"
    CONFIGURE = "C"
    QUIT = "Q"
    UNRECOGNIZED = "?"

    @property
    def is_burn(self) -> bool:
        return self in (Command.BURN_LEFT, Command.BURN_RIGHT)

    @property
    def is_turn(self) -> bool:
        """Commands that advance the simulation by one time step."""
        return self in (Command.BURN_LEFT, Command.BURN_RIGHT, Command.DRIFT)

    @classmethod
    def from_key(cls, key: str) -> "Command":
        """Map a typed key (any case) to a command; unknown keys are UNRECOGNIZED."""
        key = key.strip()[:1].upper()
        if not key or key == cls.UNRECOGNIZED.value:
            return cls.UNRECOGNIZED
        try:
            return cls(key)
        except ValueError:
            return cls.UNRECOGNIZED

