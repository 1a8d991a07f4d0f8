from __future__ import annotations

import random

import numpy as np
import pytest

from core.lander import StatusSnapshot
from core.components import FlightState
from core.maths import Vector2
from core.terrain import TerrainProfile, generate_profile
from ui.radar import EXHAUST, GROUND, LANDER, RadarView, RadarVisualizer
from ui.renderer import build_radar_frame_lines

FLAT = TerrainProfile.from_heights([0.0] * 21)


@pytest.mark.parametrize("altitude", [0.0, 10.0, 59.0, 60.0, 350.0, 5000.0])
def test_grid_is_always_16_by_61(altitude: float) -> None:
    profile = generate_profile(random.Random(int(altitude)))
    for x in (-130.0, -100.0, 0.0, 42.0, 100.0, 130.0):
        view = RadarVisualizer().render(Vector2(x, altitude), True, profile)
        assert view.grid.shape == (16, 61)
        assert len(view.rows) == 16
        assert all(len(row) == 61 for row in view.rows)
        assert len(view.labels) == 16


def test_flat_ground_fills_below_edge_row() -> None:
    view = RadarVisualizer().render(Vector2(200.0, 10.0), False, FLAT)
    # landing window: height 0 maps to row 9
    assert set(view.grid[9]) == {"_"}
    assert (view.grid[10:] == GROUND).all()
    assert (view.grid[:9] == " ").all()


def test_lander_and_exhaust_glyphs() -> None:
    view = RadarVisualizer().render(Vector2(0.0, 10.0), True, FLAT)
    assert view.grid[6, 30] == LANDER
    assert view.grid[7, 30] == EXHAUST
    assert view.find(LANDER) == (30, 6)

    quiet = RadarVisualizer().render(Vector2(0.0, 10.0), False, FLAT)
    assert quiet.grid[7, 30] == " "


def test_lander_not_drawn_over_terrain() -> None:
    view = RadarVisualizer().render(Vector2(0.0, 0.0), True, FLAT)
    assert view.find(LANDER) is None
    assert view.find(EXHAUST) is None


@pytest.mark.parametrize("pos", [(150.0, 10.0), (-101.7, 10.0), (0.0, 59.0)])
def test_off_grid_lander_is_skipped(pos) -> None:
    view = RadarVisualizer().render(Vector2(pos), True, FLAT)
    assert view.find(LANDER) is None


def test_lander_column_is_monotonic_in_x() -> None:
    visualizer = RadarVisualizer()
    columns = []
    for x in np.linspace(-100.0, 100.0, 401):
        view = visualizer.render(Vector2(float(x), 200.0), False, FLAT)
        cell = view.find(LANDER)
        assert cell is not None
        columns.append(cell[0])
    assert columns == sorted(columns)
    assert columns[0] == 0
    assert columns[-1] == 60


def test_slope_glyphs_follow_height_changes() -> None:
    heights = [0.0] * 21
    heights[10] = 5.0
    view = RadarVisualizer().render(Vector2(0.0, 10.0), False, TerrainProfile.from_heights(heights))
    rows = "".join(view.rows)
    assert "/" in rows
    assert "\\" in rows
    assert view.grid[9, 0] == "_"


def test_labels_descend_from_window_top() -> None:
    view = RadarVisualizer().render(Vector2(0.0, 10.0), False, FLAT)
    assert view.labels[0] == pytest.approx(25.0)
    assert view.labels[-1] == pytest.approx(-15.0)
    assert list(view.labels) == sorted(view.labels, reverse=True)

    high = RadarVisualizer().render(Vector2(0.0, 300.0), False, FLAT)
    assert high.labels[0] == pytest.approx(330.0)
    assert high.labels[-1] == pytest.approx(180.0)


def test_render_does_not_touch_profile() -> None:
    profile = generate_profile(random.Random(5))
    before = profile.heights.copy()
    RadarVisualizer().render(Vector2(0.0, 30.0), True, profile)
    assert np.array_equal(profile.heights, before)


def test_render_snapshot_uses_lander_position() -> None:
    snap = StatusSnapshot(
        x=0.0,
        altitude=10.0,
        vx=0.0,
        vy=0.0,
        dvx=0.0,
        dvy=0.0,
        fuel=3,
        engines_on=True,
        engines_forced_off=False,
        radar_active=True,
        radar_turns_remaining=2,
        state=FlightState.FLYING,
    )
    view = RadarVisualizer().render_snapshot(snap, FLAT)
    assert view.find(LANDER) == (30, 6)


def test_view_rejects_wrong_shape() -> None:
    window = RadarVisualizer().render(Vector2(0.0, 10.0), False, FLAT).window
    with pytest.raises(ValueError):
        RadarView(grid=np.full((15, 61), " "), labels=(0.0,) * 15, window=window)


def test_frame_lines_wrap_grid() -> None:
    view = RadarVisualizer().render(Vector2(0.0, 10.0), False, FLAT)
    lines = build_radar_frame_lines(view)
    assert len(lines) == 16 + 3
    assert lines[0].startswith(".---[ RADAR VISUALS ]")
    assert len(lines[0]) == 65
    assert len(lines[-2]) == 65
    assert lines[1].endswith("| +25m")
    assert lines[16].endswith("| -15m")


def test_axis_legend_centres_zero_under_middle_column() -> None:
    view = RadarVisualizer().render(Vector2(0.0, 10.0), False, FLAT)
    legend = build_radar_frame_lines(view)[-1]
    assert legend.startswith("  -100m")
    assert legend.index("0m", 8) == 33
    assert legend.endswith("+100m")
    assert len(legend) == 64
