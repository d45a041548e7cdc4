from __future__ import annotations

from ..core.enums import ChartKind, TextAlign, TextBaseline
from ..core.models import BoundingBox
from ..surfaces.base import Path, TextStyle
from .base import BaseChart
from .layout import (
    compute_slices,
    format_value,
    pie_center,
    pie_radius,
    slice_at_point,
)
from .palette import color_at, palette_for

SLICE_BORDER_COLOR = "#fff"
SLICE_BORDER_WIDTH = 2
EMPTY_PIE_COLOR = "#e0e0e0"
PERCENT_STYLE = TextStyle(
    size=12, bold=True, color="#fff", align=TextAlign.CENTER, baseline=TextBaseline.MIDDLE
)
LEGEND_STYLE = TextStyle(size=12, color="#333", align=TextAlign.LEFT, baseline=TextBaseline.MIDDLE)
LEGEND_BOTTOM_OFFSET = 80
LEGEND_ROW_HEIGHT = 20
LEGEND_SWATCH = 12
LEGEND_TEXT_GAP = 18


class PieChart(BaseChart):
    """Pie chart with percentage labels and a legend row per data point.

    A dataset totalling zero has nothing to divide by; it is drawn as an
    outlined empty disc with a "No data" placeholder, followed by the legend.
    """

    kind = ChartKind.PIE
    DEFAULT_PADDING = 40

    @property
    def colors(self) -> list[str]:
        return palette_for(len(self.data), self.config.colors)

    def draw(self) -> None:
        surface = self.surface
        surface.clear(0, 0, self.width, self.height)
        self._draw_title()

        box = self.box
        cx, cy = pie_center(box)
        radius = pie_radius(box, self.padding)
        colors = self.colors
        slices = compute_slices(self.data, box, self.padding)

        if not slices:
            if radius > 0:
                surface.stroke_path(Path.circle(cx, cy, radius), EMPTY_PIE_COLOR, SLICE_BORDER_WIDTH)
            self._draw_placeholder(cx, cy)
        elif radius > 0:
            for geometry in slices:
                wedge = Path.wedge(cx, cy, radius, geometry.start, geometry.end)
                surface.fill_path(wedge, color_at(geometry.index, colors))
                surface.stroke_path(wedge, SLICE_BORDER_COLOR, SLICE_BORDER_WIDTH)
                surface.fill_text(
                    geometry.percentage_text, geometry.label_x, geometry.label_y, PERCENT_STYLE
                )

        self._draw_legend(colors)

    def _draw_legend(self, colors: list[str]) -> None:
        legend_x = self.padding
        legend_y = self.height - LEGEND_BOTTOM_OFFSET
        for index, point in enumerate(self.data):
            y = legend_y + index * LEGEND_ROW_HEIGHT
            self.surface.fill_rect(
                legend_x, y - 7, LEGEND_SWATCH, LEGEND_SWATCH, color_at(index, colors)
            )
            self.surface.fill_text(
                f"{point.label} ({format_value(point.value)})",
                legend_x + LEGEND_TEXT_GAP,
                y,
                LEGEND_STYLE,
            )

    def _hit_test(self, box: BoundingBox, x: float, y: float) -> int | None:
        slices = compute_slices(self.data, box, self.padding)
        return slice_at_point(slices, box, self.padding, x, y)
