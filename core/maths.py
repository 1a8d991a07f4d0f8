"""Math utilities for 2D vectors, ranges, and grid rounding."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from pygame.math import Vector2 as _Vector2  # noqa: E402

# Export Vector2 alias
Vector2 = _Vector2


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (unlike builtin round)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def lerp(a: float, b: float, t: float) -> float:
    return a * (1.0 - t) + b * t


@dataclass(frozen=True)
class Range1D:
    min: float
    max: float

    @classmethod
    def from_min_span(cls, start: float, span: float) -> "Range1D":
        return cls(start, start + span)

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def normalize(self, x: float) -> float:
        """Map x into [0, 1] across the range (unclamped)."""
        return (x - self.min) / self.span

    def denormalize(self, t: float) -> float:
        return self.min + t * self.span
