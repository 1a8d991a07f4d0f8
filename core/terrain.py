"""Terrain profile generation and landing-safety scoring."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

import numpy as np

from core.config import (
    HAZARD_PROBABILITY,
    TERRAIN_SAMPLES,
    TERRAIN_SPACING,
    WORLD_X_MIN,
)
from core.maths import lerp, round_half_away

# World x of each terrain sample: -100, -90, ..., +100
SAMPLE_XS = np.arange(TERRAIN_SAMPLES, dtype=float) * TERRAIN_SPACING + WORLD_X_MIN
LAST_INDEX = TERRAIN_SAMPLES - 1


def nearest_index(x: float) -> int:
    """Nearest sample index for world x, not clamped."""
    return round_half_away((x - WORLD_X_MIN) / TERRAIN_SPACING)


def clamp_index(index: int) -> int:
    return max(0, min(LAST_INDEX, index))


@dataclass(frozen=True, eq=False)
class TerrainProfile:
    """Fixed 21-sample height profile plus its precomputed best landing zone."""

    heights: np.ndarray
    safe_landing_x: float = 0.0
    safe_landing_score: float = 0.0

    def __post_init__(self):
        heights = np.array(self.heights, dtype=float)
        if heights.shape != (TERRAIN_SAMPLES,):
            raise ValueError(
                f"Terrain profile needs exactly {TERRAIN_SAMPLES} samples, got shape {heights.shape}"
            )
        heights.setflags(write=False)
        object.__setattr__(self, "heights", heights)

    @classmethod
    def from_heights(cls, heights) -> "TerrainProfile":
        """Build a profile and fill in its recommended landing zone."""
        bare = cls(heights)
        x, score = best_landing_zone(bare)
        return cls(bare.heights, safe_landing_x=x, safe_landing_score=score)

    def __len__(self) -> int:
        return TERRAIN_SAMPLES

    def height_at_index(self, index: int) -> float:
        return float(self.heights[clamp_index(index)])

    def height_at(self, x: float) -> float:
        """Height of the nearest sample, with x clamped into the world range."""
        return self.height_at_index(nearest_index(x))

    def interpolate(self, x: float) -> float:
        """Linear interpolation between the two samples bracketing x."""
        pos = (x - WORLD_X_MIN) / TERRAIN_SPACING
        i0 = clamp_index(math.floor(pos))
        i1 = clamp_index(math.ceil(pos))
        if i0 == i1:
            return float(self.heights[i0])
        return lerp(float(self.heights[i0]), float(self.heights[i1]), pos - i0)


class LunarSurfaceGenerator:
    """Generates terrain profiles from a smooth base plus sparse hazards.

    Hazards are step offsets applied to single samples (craters and rocks);
    no smoothing is applied afterwards.
    """

    def __init__(self, hazard_probability: float = HAZARD_PROBABILITY):
        self.hazard_probability = hazard_probability

    @staticmethod
    def base_height(x: float) -> float:
        return math.sin(x * 0.1) * 5.0 + math.cos(x * 0.05) * 3.0

    def hazard(self, rng: random.Random) -> float:
        if rng.random() >= self.hazard_probability:
            return 0.0
        return (rng.randrange(20) - 10) * 0.5

    def __call__(self, rng: random.Random) -> TerrainProfile:
        heights = [self.base_height(float(x)) + self.hazard(rng) for x in SAMPLE_XS]
        return TerrainProfile.from_heights(heights)


def generate_profile(rng: random.Random | None = None) -> TerrainProfile:
    """Generate a fresh terrain profile using rng (or a new unseeded one)."""
    return LunarSurfaceGenerator()(rng if rng is not None else random.Random())


def safety_score(profile: TerrainProfile, x: float) -> float:
    """Landing safety 0..100 at world x: penalizes height and local slope."""
    index = nearest_index(x)
    if index < 0 or index > LAST_INDEX:
        return 0.0
    heights = profile.heights
    safety = 100.0 - abs(float(heights[index])) * 10.0
    # Edge samples lack a neighbour on one side, so they get no slope penalty.
    if 0 < index < LAST_INDEX:
        slope_left = abs(float(heights[index] - heights[index - 1]))
        slope_right = abs(float(heights[index + 1] - heights[index]))
        safety -= (slope_left + slope_right) * 5.0
    return max(0.0, safety)


def best_landing_zone(profile: TerrainProfile) -> tuple[float, float]:
    """Highest-safety interior sample as (x, score); first maximum wins."""
    best_x = float(SAMPLE_XS[1])
    best_score = -1.0
    for index in range(1, LAST_INDEX):
        x = float(SAMPLE_XS[index])
        score = safety_score(profile, x)
        if score > best_score:
            best_x, best_score = x, score
    return best_x, best_score
