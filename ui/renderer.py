"""Text renderer: writes HUD, radar frames, and notices to a stream."""

from __future__ import annotations

import sys
from typing import TextIO

from core.config import GameConfig
from core.controllers import TurnResult
from ui import hud
from ui.radar import RadarView, RadarVisualizer

FRAME_TITLE = "[ RADAR VISUALS ]"


def build_radar_frame_lines(view: RadarView) -> list[str]:
    """Bordered radar grid with altitude labels and an x-axis legend."""
    width = view.grid.shape[1]
    inner = width + 2
    top = ".---" + FRAME_TITLE + "-" * (inner - 3 - len(FRAME_TITLE)) + "."
    lines = [top]
    for row, label in zip(view.rows, view.labels):
        lines.append(f"| {row} | {label:+.0f}m")
    lines.append("`" + "-" * inner + "´")
    lines.append(f"  {'-100m':<30} 0m {'+100m':>28}")
    return lines


class TextRenderer:
    """Output collaborator for the interactive game."""

    def __init__(self, stream: TextIO | None = None, visualizer: RadarVisualizer | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self.visualizer = visualizer if visualizer is not None else RadarVisualizer()

    def write_lines(self, lines: list[str]) -> None:
        for line in lines:
            print(line, file=self.stream)

    def notice(self, text: str) -> None:
        print(text, file=self.stream)

    def show_banner(self, config: GameConfig) -> None:
        self.write_lines(
            [
                "=== MOON LANDER WITH DYNAMIC RADAR VISUALS ===",
                *hud.build_control_lines(),
                f"Display Mode: {config.display_mode}",
                "",
                "NOTE: Use Radar (R) to activate the visual display, which zooms in on approach.",
                "Press 'V' to begin a new game.",
            ]
        )

    def render(self, result: TurnResult, config: GameConfig) -> None:
        if result.started:
            self.write_lines(["", "=== NEW GAME STARTED ==="])
        if not result.executed:
            self.write_lines(result.notices)

        if result.radar_report is not None:
            heading = "[Radar data from previous position]" if result.executed else ""
            self.write_lines(["", heading] if heading else [""])
            self.write_lines(hud.build_radar_report_lines(result.radar_report))

        if result.snapshot is not None:
            self.render_status(result, config)

        if result.executed:
            self.write_lines(result.notices)

    def render_status(self, result: TurnResult, config: GameConfig) -> None:
        snapshot = result.snapshot
        if snapshot is None:
            return
        if snapshot.radar_active and result.profile is not None:
            view = self.visualizer.render_snapshot(snapshot, result.profile)
            self.write_lines([""] + build_radar_frame_lines(view))
        self.write_lines([""] + hud.build_status_lines(snapshot, config))
