from __future__ import annotations

from core.components import FlightState
from core.config import (
    SAFE_HORIZONTAL_SPEED,
    SAFE_VERTICAL_SPEED,
    TERRAIN_PENALTY_FACTOR,
    WORLD_X_MAX,
    WORLD_X_MIN,
)
from core.terrain import TerrainProfile


def terrain_penalty(profile: TerrainProfile, x: float) -> float:
    """Speed-limit reduction for rough ground; zero outside the surveyed range."""
    if x < WORLD_X_MIN or x > WORLD_X_MAX:
        return 0.0
    return abs(profile.height_at(x)) * TERRAIN_PENALTY_FACTOR


def judge_landing(
    profile: TerrainProfile,
    x: float,
    altitude: float,
    vx: float,
    vy: float,
) -> FlightState:
    """Classify the lander: FLYING above ground, else SUCCESS or CRASH."""
    if altitude > 0.0:
        return FlightState.FLYING

    penalty = terrain_penalty(profile, x)
    if abs(vy) < SAFE_VERTICAL_SPEED - penalty and abs(vx) < SAFE_HORIZONTAL_SPEED - penalty:
        return FlightState.SUCCESS
    return FlightState.CRASH
