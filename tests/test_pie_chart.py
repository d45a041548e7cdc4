"""Tests for PieChart rendering against a recording surface."""

from __future__ import annotations

import math

from canvas_charts.core.enums import TextAlign
from canvas_charts.core.errors import SurfaceError
from canvas_charts.core.models import ChartConfig
from canvas_charts.surfaces.base import TextStyle
from canvas_charts.surfaces.recording import RecordingSurface
from canvas_charts.visuals.palette import DEFAULT_PALETTE
from canvas_charts.visuals.pie import EMPTY_PIE_COLOR, PieChart

WATER_ROADS = [{"label": "Water", "value": 30}, {"label": "Roads", "value": 10}]


def _render(data, config: ChartConfig | None = None, **surface_kwargs) -> RecordingSurface:
    surface = RecordingSurface(**surface_kwargs)
    assert PieChart(surface, data, config).render() is True
    return surface


def test_construction_does_not_draw() -> None:
    surface = RecordingSurface()
    PieChart(surface, WATER_ROADS)
    assert surface.calls == []


def test_water_roads_labels_and_legend() -> None:
    """75%/25% split with legend rows in dataset order."""
    surface = _render(WATER_ROADS)
    assert surface.texts() == ["75.0%", "25.0%", "Water (30)", "Roads (10)"]


def test_slices_are_wedges_from_twelve_o_clock() -> None:
    surface = _render(WATER_ROADS)
    fills = surface.calls_of("fill_path")
    assert [call.args[1] for call in fills] == [DEFAULT_PALETTE[0], DEFAULT_PALETTE[1]]

    first_segments = fills[0].args[0]
    assert first_segments[0].args == (300.0, 210.0)
    arc = first_segments[1]
    assert arc.op == "arc"
    cx, cy, radius, start, end = arc.args
    assert (cx, cy, radius) == (300.0, 210.0, 160.0)
    assert math.isclose(start, -math.pi / 2)
    assert math.isclose(end - start, 1.5 * math.pi)


def test_slices_have_white_two_pixel_border() -> None:
    surface = _render(WATER_ROADS)
    strokes = surface.calls_of("stroke_path")
    assert len(strokes) == 2
    assert all(call.args[1:] == ("#fff", 2) for call in strokes)


def test_percentage_labels_are_white_bold_and_centered() -> None:
    surface = _render(WATER_ROADS)
    style = surface.calls_of("fill_text")[0].args[3]
    assert isinstance(style, TextStyle)
    assert style.bold is True
    assert style.color == "#fff"
    assert style.align == TextAlign.CENTER


def test_legend_layout() -> None:
    surface = _render(WATER_ROADS, width=600, height=400)
    swatches = surface.calls_of("fill_rect")
    assert [call.args for call in swatches] == [
        (40, 313, 12, 12, DEFAULT_PALETTE[0]),
        (40, 333, 12, 12, DEFAULT_PALETTE[1]),
    ]
    legend_text = [call.args[:3] for call in surface.calls_of("fill_text")[2:]]
    assert legend_text == [("Water (30)", 58, 320), ("Roads (10)", 58, 340)]


def test_title_is_drawn_first_and_centered() -> None:
    surface = _render(WATER_ROADS, ChartConfig(title="Complaints"), width=500, height=300)
    title = surface.calls_of("fill_text")[0]
    assert title.args[:3] == ("Complaints", 250, 25)
    assert title.args[3].bold is True


def test_configured_colors_are_used() -> None:
    surface = _render(WATER_ROADS, ChartConfig(colors=("#111111", "#222222")))
    assert [call.args[1] for call in surface.calls_of("fill_path")] == ["#111111", "#222222"]


def test_zero_value_point_has_legend_row_but_no_slice() -> None:
    data = [{"label": "A", "value": 1}, {"label": "Zero", "value": 0}, {"label": "B", "value": 3}]
    surface = _render(data)

    assert len(surface.calls_of("fill_path")) == 2
    assert surface.texts() == ["25.0%", "75.0%", "A (1)", "Zero (0)", "B (3)"]
    # B keeps its own palette position even though Zero was skipped
    assert surface.calls_of("fill_path")[1].args[1] == DEFAULT_PALETTE[2]


def test_zero_total_renders_placeholder() -> None:
    """A dataset summing to zero draws an empty disc, 'No data' and the legend."""
    surface = _render([{"label": "X", "value": 0}])

    assert surface.calls_of("fill_path") == []
    outline = surface.calls_of("stroke_path")
    assert len(outline) == 1
    assert outline[0].args[1] == EMPTY_PIE_COLOR
    assert surface.texts() == ["No data", "X (0)"]


def test_empty_dataset_renders_placeholder() -> None:
    surface = _render([])
    assert surface.texts() == ["No data"]


def test_padding_zero_is_honored() -> None:
    surface = _render(WATER_ROADS, ChartConfig(padding=0), width=400, height=400)
    arc = surface.calls_of("fill_path")[0].args[0][1]
    assert arc.args[2] == 200.0


def test_tiny_surface_skips_slices() -> None:
    surface = _render(WATER_ROADS, width=60, height=60)
    assert surface.calls_of("fill_path") == []
    assert surface.texts() == ["Water (30)", "Roads (10)"]


def test_missing_surface_is_a_no_op() -> None:
    assert PieChart(None, WATER_ROADS).render() is False


def test_render_failure_does_not_escape() -> None:
    class BrokenSurface(RecordingSurface):
        def fill_text(self, text, x, y, style) -> None:
            raise SurfaceError("backend gone")

    assert PieChart(BrokenSurface(), WATER_ROADS).render() is False


def test_update_replaces_dataset() -> None:
    surface = RecordingSurface()
    chart = PieChart(surface, WATER_ROADS)
    chart.render()
    surface.reset()

    assert chart.update([{"label": "Parks", "value": 4}]) is True
    assert surface.texts() == ["100.0%", "Parks (4)"]


def test_render_starts_with_full_clear() -> None:
    surface = _render(WATER_ROADS, width=640, height=480, pixel_ratio=2)
    ops = [call.op for call in surface.calls]
    assert ops[:3] == ["set_backing_size", "set_scale", "clear"]
    assert surface.calls[2].args == (0, 0, 640, 480)
