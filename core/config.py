"""Centralized configuration constants and the per-process game configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Physics
DEFAULT_GRAVITY = 1.6  # Moon, m/s^2
DEFAULT_THRUST = 3.0  # m/s^2
DEFAULT_INITIAL_FUEL = 50
TIME_STEP = 1.0
LATERAL_THRUST_RATIO = 0.3

# Terrain
WORLD_X_MIN = -100.0
WORLD_X_MAX = 100.0
TERRAIN_SPACING = 10.0
TERRAIN_SAMPLES = 21
HAZARD_PROBABILITY = 0.15

# Landing
SAFE_VERTICAL_SPEED = 2.0
SAFE_HORIZONTAL_SPEED = 1.5
TERRAIN_PENALTY_FACTOR = 0.2

# Radar
RADAR_VALID_TURNS = 3
RADAR_WIDTH = 61
RADAR_HEIGHT = 16
LANDING_MODE_ALTITUDE = 60.0

# Results
DEFAULT_RESULTS_FILE = "lander_results.txt"


@dataclass
class GameConfig:
    """Settings shared by every game of a process; edited only between games."""

    gravity: float = DEFAULT_GRAVITY
    thrust: float = DEFAULT_THRUST
    initial_fuel: int = DEFAULT_INITIAL_FUEL
    display_delta_v: bool = False

    def validate(self) -> None:
        if not (math.isfinite(self.gravity) and math.isfinite(self.thrust)):
            raise ValueError("gravity and thrust must be finite")
        if self.gravity < 0.0:
            raise ValueError(f"gravity must be non-negative, got {self.gravity}")
        if self.thrust < 0.0:
            raise ValueError(f"thrust must be non-negative, got {self.thrust}")
        if self.initial_fuel < 0:
            raise ValueError(f"initial_fuel must be non-negative, got {self.initial_fuel}")

    @property
    def display_mode(self) -> str:
        return "Delta V" if self.display_delta_v else "m/s"
