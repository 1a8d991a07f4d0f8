"""HUD text for lander status and radar advisories."""

from __future__ import annotations

from core.config import GameConfig
from core.lander import StatusSnapshot
from core.sensor import RadarReport


def build_status_lines(snapshot: StatusSnapshot, config: GameConfig) -> list[str]:
    lines: list[str] = ["--- LANDER STATUS ---"]
    lines.append(f"X POS:     {snapshot.x:8.1f} m")
    lines.append(f"ALT:       {snapshot.altitude:8.1f} m")

    if config.display_delta_v:
        lines.append(f"DELTA-V H: {snapshot.dvx:8.1f} m/s")
        lines.append(f"DELTA-V V: {snapshot.dvy:8.1f} m/s")
    else:
        h_dir = "->" if snapshot.vx > 0 else "<-"
        v_dir = "v (down)" if snapshot.vy < 0 else "^ (up)"
        lines.append(f"H-SPEED:   {snapshot.vx:8.1f} m/s  {h_dir}")
        lines.append(f"V-SPEED:   {snapshot.vy:8.1f} m/s  {v_dir}")

    lines.append(f"FUEL:      {snapshot.fuel:8d} burns")
    if snapshot.engines_forced_off:
        lines.append("ENGINES:   OFF (forced, no fuel)")
    else:
        lines.append(f"ENGINES:   {'ON' if snapshot.engines_on else 'OFF'}")

    if snapshot.radar_active:
        lines.append(f"RADAR:     ACTIVE ({snapshot.radar_turns_remaining} turns remaining)")
    else:
        lines.append("RADAR:     INACTIVE (use 'R' for visuals)")
    lines.append("---------------------")
    return lines


def build_radar_report_lines(report: RadarReport) -> list[str]:
    lines = [
        f"--- LANDING RADAR DATA (Valid for {report.turns_remaining} more turns) ---",
        f"RECOMMENDED LANDING ZONE: X={report.safe_landing_x:.1f} m "
        f"(Safety: {report.safe_landing_score:.0f}%)",
        f"Distance to recommended zone: {report.distance:.1f} m",
    ]
    if report.advisory:
        lines.append(f"ADVISORY: {report.advisory}")
    lines.append("-" * 47)
    return lines


def build_control_lines() -> list[str]:
    return [
        "Controls:",
        "V: Start new game",
        "W: Engines on      S: Engines off",
        "Y: Left burn       Z: Right burn",
        "X: Drift (no burn) R: Activate radar (1 fuel)",
        "C: Configure       Q: Quit",
    ]
