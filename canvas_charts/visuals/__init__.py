"""Visualization package for canvas-style pie and bar charts.

This package turns small, pre-aggregated ``{label, value}`` datasets into
pie and bar charts drawn onto any RenderSurface. Layout is device-pixel-ratio
aware and every render redraws the whole chart from scratch.

Main Components:
    - PieChart: slices from 12 o'clock clockwise, percentage labels, legend
    - BarChart: axes, gridlines, bars, value/category labels, y-axis ticks
    - ChartTooltip: lazily created floating label, shareable across charts
    - create_chart: construct + render + subscribe to resize in one call
    - palette_for / configure_surface: color assignment and surface sizing

Usage:
    from pathlib import Path

    from canvas_charts.core.events import ResizeNotifier
    from canvas_charts.surfaces import MatplotlibSurface
    from canvas_charts.visuals import create_chart

    notifier = ResizeNotifier()
    surface = MatplotlibSurface(width=600, height=400, pixel_ratio=2)
    with create_chart("pie", surface, [{"label": "Water", "value": 30}], notifier=notifier):
        surface.save(Path("water.png"))

Architecture Notes:
    - Geometry lives in pure functions (layout.py) so it is testable without drawing
    - Missing surfaces and empty/zero datasets render placeholders instead of raising
    - Each chart holds at most one resize subscription, released by dispose()
"""

from __future__ import annotations

from .bar import BarChart
from .base import BaseChart
from .factory import create_chart
from .layout import configure_surface
from .palette import DEFAULT_PALETTE, palette_for
from .pie import PieChart
from .tooltip import ChartTooltip

__all__ = [
    "BarChart",
    "BaseChart",
    "ChartTooltip",
    "DEFAULT_PALETTE",
    "PieChart",
    "configure_surface",
    "create_chart",
    "palette_for",
]
