"""Landing radar readings derived from the surveyed terrain profile."""

from __future__ import annotations

from dataclasses import dataclass

from core.terrain import TerrainProfile

FAR_ZONE_DISTANCE = 50.0
NEAR_ZONE_DISTANCE = 10.0


@dataclass(frozen=True)
class RadarReport:
    """What the radar tells the pilot about the recommended landing zone."""

    turns_remaining: int
    safe_landing_x: float
    safe_landing_score: float
    distance: float

    @property
    def advisory(self) -> str | None:
        if self.distance > FAR_ZONE_DISTANCE:
            return "Recommend horizontal maneuvering"
        if self.distance < NEAR_ZONE_DISTANCE:
            return "On approach to safe zone"
        return None


def get_radar_report(profile: TerrainProfile, x: float, turns_remaining: int) -> RadarReport:
    return RadarReport(
        turns_remaining=turns_remaining,
        safe_landing_x=profile.safe_landing_x,
        safe_landing_score=profile.safe_landing_score,
        distance=abs(x - profile.safe_landing_x),
    )
