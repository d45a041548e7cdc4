from __future__ import annotations

from ..core.enums import ChartKind
from ..core.events import ResizeNotifier
from ..core.models import ChartConfig
from ..surfaces.base import RenderSurface
from ..surfaces.registry import SurfaceRegistry
from .bar import BarChart
from .base import BaseChart, DataInput
from .pie import PieChart
from .tooltip import ChartTooltip

CHART_TYPES: dict[ChartKind, type[BaseChart]] = {
    ChartKind.PIE: PieChart,
    ChartKind.BAR: BarChart,
}


def create_chart(
    kind: ChartKind | str,
    surface: RenderSurface | str | None,
    data: DataInput,
    config: ChartConfig | None = None,
    *,
    notifier: ResizeNotifier | None = None,
    registry: SurfaceRegistry | None = None,
    tooltip: ChartTooltip | None = None,
    device_pixel_ratio: float | None = None,
) -> BaseChart:
    """Build a chart, draw it once and keep it in sync with resizes.

    Args:
        kind: ``pie`` or ``bar``
        surface: A surface, or the name of one registered in ``registry``
        data: Ordered DataPoints or ``{label, value}`` mappings
        config: Presentation options
        notifier: Resize source to subscribe to; the returned chart's
            ``dispose()`` releases the subscription
        registry: Used to resolve ``surface`` when it is a name
        tooltip: Shared tooltip for ``show_tooltip``
        device_pixel_ratio: Overrides the surface's own ratio

    Returns:
        The rendered chart. An unresolvable surface still yields a chart whose
        renders are no-ops.
    """
    if isinstance(surface, str):
        surface = registry.resolve(surface) if registry is not None else None
    chart_type = CHART_TYPES[ChartKind(kind)]
    chart = chart_type(
        surface, data, config, tooltip=tooltip, device_pixel_ratio=device_pixel_ratio
    )
    chart.render()
    if notifier is not None:
        chart.bind_resize(notifier)
    return chart
