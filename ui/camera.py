"""Grid camera mapping world coordinates to radar character cells."""

from __future__ import annotations

from core.config import RADAR_HEIGHT, RADAR_WIDTH, WORLD_X_MAX, WORLD_X_MIN
from core.maths import Range1D, Vector2, round_half_away
from ui.auto_zoom import ZoomWindow

WORLD_X_RANGE = Range1D(WORLD_X_MIN, WORLD_X_MAX)


class GridCamera:
    """Fixed-width horizontal mapping plus a zoomable vertical window.

    Columns span the whole surveyed strip; rows cover the zoom window with
    row 0 at the top (world y-up -> grid row-down).
    """

    def __init__(
        self,
        window: ZoomWindow,
        width: int = RADAR_WIDTH,
        height: int = RADAR_HEIGHT,
        x_range: Range1D = WORLD_X_RANGE,
    ):
        self.window = window
        self.width = width
        self.height = height
        self.x_range = x_range

    def column_to_world_x(self, column: int) -> float:
        return self.x_range.denormalize(column / (self.width - 1))

    def world_x_to_column(self, x: float) -> int:
        return round_half_away(self.x_range.normalize(x) * (self.width - 1))

    def world_y_to_row(self, y: float) -> int:
        t = (y - self.window.y_min) / self.window.height
        return (self.height - 1) - round_half_away(t * (self.height - 1))

    def row_to_world_y(self, row: int) -> float:
        """Altitude label for a row; row 0 shows the window top."""
        return self.window.y_max - row / (self.height - 1) * self.window.height

    def world_to_cell(self, pos: Vector2) -> tuple[int, int]:
        """(column, row) for a world position; may fall outside the grid."""
        return self.world_x_to_column(pos.x), self.world_y_to_row(pos.y)

    def contains(self, column: int, row: int) -> bool:
        return 0 <= column < self.width and 0 <= row < self.height
