from __future__ import annotations

from ..core.enums import ChartKind, TextAlign, TextBaseline
from ..core.models import BoundingBox
from ..surfaces.base import TextStyle
from .base import BaseChart
from .layout import bar_at_point, compute_bars, format_value, truncate_label

DEFAULT_BAR_COLOR = "#4285F4"
AXIS_COLOR = "#ddd"
GRID_COLOR = "#f0f0f0"
VALUE_STYLE = TextStyle(
    size=11, bold=True, color="#333", align=TextAlign.CENTER, baseline=TextBaseline.BOTTOM
)
CATEGORY_STYLE = TextStyle(size=11, color="#333", align=TextAlign.CENTER, baseline=TextBaseline.TOP)
TICK_STYLE = TextStyle(size=10, color="#666", align=TextAlign.RIGHT, baseline=TextBaseline.MIDDLE)
VALUE_LABEL_GAP = 5
CATEGORY_LABEL_GAP = 10
TICK_LABEL_GAP = 10


class BarChart(BaseChart):
    """Vertical bar chart with value labels, category labels and y-axis ticks.

    An empty dataset has no maximum to scale against; it is drawn as bare
    axes with a "No data" placeholder and no ticks.
    """

    kind = ChartKind.BAR
    DEFAULT_PADDING = 50

    @property
    def color(self) -> str:
        return self.config.color or DEFAULT_BAR_COLOR

    def draw(self) -> None:
        surface = self.surface
        surface.clear(0, 0, self.width, self.height)
        self._draw_title()

        layout = compute_bars(self.data, self.box, self.padding)

        # Axes
        surface.stroke_line(layout.left, layout.baseline, layout.right, layout.baseline, AXIS_COLOR)
        surface.stroke_line(layout.left, layout.top, layout.left, layout.baseline, AXIS_COLOR)

        if not layout.bars:
            self._draw_placeholder(layout.left + layout.chart_width / 2, layout.top + layout.chart_height / 2)
            return

        for bar in layout.bars:
            point = self.data[bar.index]
            surface.fill_rect(bar.x, bar.y, bar.width, bar.height, self.color)
            surface.fill_text(
                format_value(point.value), bar.center_x, bar.y - VALUE_LABEL_GAP, VALUE_STYLE
            )
            surface.fill_text(
                truncate_label(point.label),
                bar.center_x,
                layout.baseline + CATEGORY_LABEL_GAP,
                CATEGORY_STYLE,
            )

        for tick in layout.ticks:
            surface.fill_text(str(tick.value), layout.left - TICK_LABEL_GAP, tick.y, TICK_STYLE)
            surface.stroke_line(layout.left, tick.y, layout.right, tick.y, GRID_COLOR)

    def _hit_test(self, box: BoundingBox, x: float, y: float) -> int | None:
        return bar_at_point(compute_bars(self.data, box, self.padding), x, y)
