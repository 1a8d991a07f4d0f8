from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from core.commands import Command
from core.config import DEFAULT_INITIAL_FUEL, TIME_STEP
from core.maths import Vector2
from core.terrain import TerrainProfile


class FlightState(str, Enum):
    """Session states; SUCCESS and CRASH are terminal."""

    NOT_STARTED = "not_started"
    FLYING = "flying"
    SUCCESS = "landed"
    CRASH = "crashed"

    @property
    def is_terminal(self) -> bool:
        return self in (FlightState.SUCCESS, FlightState.CRASH)


@dataclass
class Transform:
    """Component representing position; y is altitude above the datum."""
    pos: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float):
        self.pos.y = value


@dataclass
class PhysicsState:
    """Component representing velocity and the previous turn's velocity."""
    vel: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    prev_vel: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    time_step: float = TIME_STEP

    @property
    def delta_vel(self) -> Vector2:
        return self.vel - self.prev_vel


@dataclass
class FuelTank:
    """Component representing fuel, counted in whole burns."""
    fuel: int = DEFAULT_INITIAL_FUEL

    def consume(self, amount: int = 1) -> None:
        self.fuel = max(0, self.fuel - amount)

    @property
    def empty(self) -> bool:
        return self.fuel <= 0


@dataclass
class Engine:
    """Component representing main engine state."""
    on: bool = False
    forced_off: bool = False  # set for turns where an empty tank forced drift


@dataclass
class Radar:
    """Component representing the landing radar and the terrain it describes."""
    profile: TerrainProfile | None = None
    active: bool = False
    turns_remaining: int = 0


@dataclass
class LanderState:
    """Component representing the lander's flight state."""
    state: FlightState = FlightState.NOT_STARTED


@dataclass
class ControlIntent:
    """Per-turn command selected by the turn controller."""
    command: Command = Command.DRIFT
