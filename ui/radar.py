"""ASCII radar view of terrain and lander, zoomed by altitude."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from core.config import RADAR_HEIGHT, RADAR_WIDTH
from core.lander import StatusSnapshot
from core.maths import Vector2
from core.terrain import TerrainProfile
from ui.auto_zoom import ZoomWindow, select_zoom_window
from ui.camera import GridCamera

EMPTY = " "
GROUND = "#"
EDGE_FLAT = "_"
EDGE_RISING = "/"
EDGE_FALLING = "\\"
LANDER = "A"
EXHAUST = "*"

# Height change between neighbouring columns that counts as a slope.
SLOPE_THRESHOLD = 0.5


@dataclass(frozen=True, eq=False)
class RadarView:
    """Rendered radar frame: character grid plus one altitude label per row."""

    grid: np.ndarray
    labels: tuple[float, ...]
    window: ZoomWindow

    def __post_init__(self):
        if self.grid.shape != (RADAR_HEIGHT, RADAR_WIDTH):
            raise ValueError(f"Radar grid must be {RADAR_HEIGHT}x{RADAR_WIDTH}, got {self.grid.shape}")
        if len(self.labels) != RADAR_HEIGHT:
            raise ValueError(f"Expected {RADAR_HEIGHT} row labels, got {len(self.labels)}")

    @property
    def rows(self) -> list[str]:
        return ["".join(row) for row in self.grid]

    def find(self, glyph: str) -> tuple[int, int] | None:
        """(column, row) of the first cell holding glyph, scanning rows top-down."""
        hits = np.argwhere(self.grid == glyph)
        if hits.size == 0:
            return None
        row, column = hits[0]
        return int(column), int(row)


class RadarVisualizer:
    """Projects a terrain profile and the lander onto a fixed character grid."""

    def __init__(self, width: int = RADAR_WIDTH, height: int = RADAR_HEIGHT):
        self.width = width
        self.height = height

    def render(self, pos: Vector2, engines_on: bool, profile: TerrainProfile) -> RadarView:
        window = select_zoom_window(pos.y)
        camera = GridCamera(window, self.width, self.height)
        grid = np.full((self.height, self.width), EMPTY, dtype="<U1")

        self._draw_terrain(grid, camera, profile)
        self._draw_lander(grid, camera, pos, engines_on)

        labels = tuple(camera.row_to_world_y(row) for row in range(self.height))
        return RadarView(grid=grid, labels=labels, window=window)

    def render_snapshot(self, snapshot: StatusSnapshot, profile: TerrainProfile) -> RadarView:
        return self.render(Vector2(snapshot.x, snapshot.altitude), snapshot.engines_on, profile)

    def _draw_terrain(self, grid: np.ndarray, camera: GridCamera, profile: TerrainProfile) -> None:
        prev_h = 0.0
        for column in range(self.width):
            h = profile.interpolate(camera.column_to_world_x(column))
            edge = EDGE_FLAT
            if column > 0:
                if h > prev_h + SLOPE_THRESHOLD:
                    edge = EDGE_RISING
                elif h < prev_h - SLOPE_THRESHOLD:
                    edge = EDGE_FALLING
            prev_h = h

            row = camera.world_y_to_row(h)
            if 0 <= row < self.height:
                grid[row, column] = edge
                grid[row + 1 :, column] = GROUND

    def _draw_lander(
        self, grid: np.ndarray, camera: GridCamera, pos: Vector2, engines_on: bool
    ) -> None:
        column, row = camera.world_to_cell(pos)
        if not camera.contains(column, row):
            return
        if grid[row, column] == EMPTY:
            grid[row, column] = LANDER
        if engines_on and row + 1 < self.height and grid[row + 1, column] == EMPTY:
            grid[row + 1, column] = EXHAUST
