"""Results log: one human-readable record appended per concluded game."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from core.components import FlightState
from core.lander import StatusSnapshot
from core.terrain import TerrainProfile, safety_score

logger = logging.getLogger(__name__)

OUTCOME_LABELS = {
    FlightState.SUCCESS: "SUCCESS",
    FlightState.CRASH: "CRASHED",
}


@dataclass(frozen=True)
class ResultRecord:
    outcome: FlightState
    x: float
    altitude: float
    vx: float
    vy: float
    fuel: int
    zone_safety: float
    timestamp: datetime

    @property
    def label(self) -> str:
        return OUTCOME_LABELS[self.outcome]


def build_result_record(
    snapshot: StatusSnapshot,
    profile: TerrainProfile,
    *,
    timestamp: datetime | None = None,
) -> ResultRecord:
    if not snapshot.state.is_terminal:
        raise ValueError(f"Cannot record a game that is still {snapshot.state.value}")
    return ResultRecord(
        outcome=snapshot.state,
        x=snapshot.x,
        altitude=snapshot.altitude,
        vx=snapshot.vx,
        vy=snapshot.vy,
        fuel=snapshot.fuel,
        zone_safety=safety_score(profile, snapshot.x),
        timestamp=timestamp if timestamp is not None else datetime.now(),
    )


def format_result_record(record: ResultRecord) -> str:
    stamp = record.timestamp.strftime("%a %b %d %H:%M:%S %Y")
    lines = [
        f"[{stamp}] - {record.label}",
        f"  Final Position: H={record.x:.1f} m, V={record.altitude:.1f} m",
        f"  Impact Velocity: H={record.vx:.1f} m/s, V={record.vy:.1f} m/s",
        f"  Fuel Remaining: {record.fuel} burns",
        f"  Landing Zone Safety: {record.zone_safety:.0f}% (at A={record.x:.1f} m)",
        "",
    ]
    return "\n".join(lines) + "\n"


def append_result(path: str | Path, record: ResultRecord) -> Path:
    """Append record to the log at path; raises OSError if it cannot be written."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("a", encoding="utf-8") as fh:
        fh.write(format_result_record(record))
    logger.info("Recorded %s result to %s", record.label, out)
    return out
