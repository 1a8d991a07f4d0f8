"""Altitude-driven zoom selection for the radar view."""

from __future__ import annotations

from dataclasses import dataclass

from core.config import LANDING_MODE_ALTITUDE
from core.maths import Range1D

LANDING_VIEW = Range1D.from_min_span(-15.0, 40.0)
APPROACH_VIEW_HEIGHT = 150.0
APPROACH_HEADROOM = 30.0


@dataclass(frozen=True)
class ZoomWindow:
    """Vertical world window shown by the radar, [min, max)."""

    mode: str
    span: Range1D

    @property
    def y_min(self) -> float:
        return self.span.min

    @property
    def y_max(self) -> float:
        return self.span.max

    @property
    def height(self) -> float:
        return self.span.span


def select_zoom_window(altitude: float) -> ZoomWindow:
    """Close-in ground view below the landing-mode altitude, else track the lander.

    In approach mode the window top sits a fixed headroom above the lander so
    it stays near the top of the frame.
    """
    if altitude < LANDING_MODE_ALTITUDE:
        return ZoomWindow("landing", LANDING_VIEW)
    top = altitude + APPROACH_HEADROOM
    return ZoomWindow("approach", Range1D(top - APPROACH_VIEW_HEIGHT, top))
