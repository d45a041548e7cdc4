"""Tests for the matplotlib-backed raster surface."""

from __future__ import annotations

import base64
import struct
from pathlib import Path

import pytest

from canvas_charts.core.errors import SurfaceError
from canvas_charts.surfaces.matplotlib_surface import MatplotlibSurface
from canvas_charts.visuals.bar import BarChart
from canvas_charts.visuals.pie import PieChart

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
DATA = [{"label": "Water", "value": 30}, {"label": "Roads", "value": 10}]


def _png_size(data: bytes) -> tuple[int, int]:
    # IHDR starts right after the 8-byte signature and 8-byte chunk header
    return struct.unpack(">II", data[16:24])


def test_pie_renders_to_png() -> None:
    surface = MatplotlibSurface(width=600, height=400)
    assert PieChart(surface, DATA).render() is True

    data = surface.to_png()
    assert data.startswith(PNG_SIGNATURE)


def test_png_resolution_follows_pixel_ratio() -> None:
    surface = MatplotlibSurface(width=300, height=200, pixel_ratio=2)
    BarChart(surface, DATA).render()

    assert surface.backing_size == (600, 400)
    assert surface.scale == 2
    width, height = _png_size(surface.to_png())
    assert width == pytest.approx(600, abs=1)
    assert height == pytest.approx(400, abs=1)


def test_rerender_replaces_previous_artists() -> None:
    surface = MatplotlibSurface(width=600, height=400)
    chart = BarChart(surface, DATA)
    chart.render()
    axes = surface.figure.axes[0]
    counts = (len(axes.patches), len(axes.lines), len(axes.texts))

    chart.render()
    axes = surface.figure.axes[0]
    assert (len(axes.patches), len(axes.lines), len(axes.texts)) == counts


def test_full_clear_removes_drawing() -> None:
    surface = MatplotlibSurface(width=200, height=100)
    surface.fill_rect(10, 10, 20, 20, "#ff0000")
    surface.clear(0, 0, 200, 100)
    axes = surface.figure.axes[0]
    assert len(axes.patches) == 0


def test_placeholders_render_without_errors() -> None:
    pie_surface = MatplotlibSurface()
    bar_surface = MatplotlibSurface()
    assert PieChart(pie_surface, [{"label": "X", "value": 0}]).render() is True
    assert BarChart(bar_surface, []).render() is True
    assert pie_surface.to_png().startswith(PNG_SIGNATURE)
    assert bar_surface.to_png().startswith(PNG_SIGNATURE)


def test_base64_round_trips_png() -> None:
    surface = MatplotlibSurface(width=120, height=80)
    PieChart(surface, DATA).render()
    assert base64.b64decode(surface.to_base64()).startswith(PNG_SIGNATURE)


def test_save_writes_file(tmp_path: Path) -> None:
    surface = MatplotlibSurface(width=120, height=80)
    PieChart(surface, DATA).render()

    path = surface.save(tmp_path / "nested" / "pie.png")

    assert path.exists()
    assert path.read_bytes().startswith(PNG_SIGNATURE)


def test_save_failure_raises_surface_error(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")
    surface = MatplotlibSurface(width=120, height=80)
    with pytest.raises(SurfaceError):
        surface.save(blocker / "pie.png")


def test_non_positive_scale_rejected() -> None:
    with pytest.raises(SurfaceError):
        MatplotlibSurface().set_scale(0)


def test_dollar_labels_are_drawn_as_literal_text() -> None:
    surface = MatplotlibSurface(width=300, height=200)
    PieChart(surface, [{"label": "$5-$10", "value": 3}, {"label": "Free", "value": 1}]).render()

    texts = surface.figure.axes[0].texts
    assert "$5-$10 (3)" in [text.get_text() for text in texts]
    assert not any(text.get_parse_math() for text in texts)


def test_label_that_is_not_valid_mathtext_still_rasterizes(tmp_path: Path) -> None:
    surface = MatplotlibSurface(width=300, height=200)
    assert BarChart(surface, [{"label": "Fee $^$", "value": 4}]).render() is True

    assert surface.to_png().startswith(PNG_SIGNATURE)
    assert surface.save(tmp_path / "fees.png").exists()
