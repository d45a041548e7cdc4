"""Shared lifecycle for canvas-style charts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Union

from ..core.enums import ChartKind, TextAlign, TextBaseline
from ..core.events import ResizeNotifier, Subscription
from ..core.logging_config import get_logger
from ..core.models import BoundingBox, ChartConfig, DataPoint, to_dataset
from ..surfaces.base import RenderSurface, TextStyle
from .layout import TITLE_Y, configure_surface, format_value
from .tooltip import ChartTooltip

logger = get_logger(__name__)

TITLE_STYLE = TextStyle(size=16, bold=True, color="#333", align=TextAlign.CENTER)
PLACEHOLDER_STYLE = TextStyle(
    size=14, color="#999", align=TextAlign.CENTER, baseline=TextBaseline.MIDDLE
)
PLACEHOLDER_TEXT = "No data"

DataInput = Iterable[Union[DataPoint, Mapping[str, Any]]]


class BaseChart(ABC):
    """Abstract base class for charts drawn onto a RenderSurface.

    Construction only stores the surface, dataset and configuration; nothing
    is drawn until ``render()``. Every render re-reads the surface size,
    reconfigures it and redraws from scratch, so it is safe to call at any
    time and repeated calls produce identical output.

    Attributes:
        kind: Chart type handled by the subclass
        DEFAULT_PADDING: Padding used when the config leaves it unset
    """

    kind: ChartKind
    DEFAULT_PADDING: float = 40

    def __init__(
        self,
        surface: RenderSurface | None,
        data: DataInput,
        config: ChartConfig | None = None,
        *,
        tooltip: ChartTooltip | None = None,
        device_pixel_ratio: float | None = None,
    ):
        """Initialize the chart without drawing.

        Args:
            surface: Surface to draw on; None when it could not be resolved
            data: Ordered DataPoints or ``{label, value}`` mappings
            config: Presentation options (defaults apply when omitted)
            tooltip: Optional shared tooltip used by ``show_tooltip``
            device_pixel_ratio: Overrides the ratio reported by the surface
        """
        self.surface = surface
        self.data = to_dataset(data)
        self.config = config or ChartConfig()
        self.tooltip = tooltip
        self.device_pixel_ratio = device_pixel_ratio
        self.width = 0.0
        self.height = 0.0
        self._subscription: Subscription | None = None

    @property
    def padding(self) -> float:
        if self.config.padding is not None:
            return self.config.padding
        return self.DEFAULT_PADDING

    @property
    def box(self) -> BoundingBox:
        return BoundingBox(self.width, self.height)

    @property
    def bound(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def setup(self) -> BoundingBox:
        box = configure_surface(self.surface, self.device_pixel_ratio)
        self.width = box.width
        self.height = box.height
        return box

    def render(self) -> bool:
        """Lay out and draw the whole chart.

        Returns:
            True when the chart was drawn, False when there is no surface or
            drawing failed (the failure is logged, never raised)
        """
        if self.surface is None:
            logger.debug("No surface to render on", extra={"chart": self.kind.value})
            return False
        try:
            self.setup()
            self.draw()
        except Exception:
            logger.exception("Chart render failed", extra={"chart": self.kind.value})
            return False
        logger.debug(
            "Chart rendered",
            extra={"chart": self.kind.value, "points": len(self.data), "width": self.width},
        )
        return True

    def update(self, data: DataInput, config: ChartConfig | None = None) -> bool:
        """Replace the dataset (and optionally the config), then re-render."""
        self.data = to_dataset(data)
        if config is not None:
            self.config = config
        return self.render()

    def bind_resize(self, notifier: ResizeNotifier) -> Subscription:
        """Re-render on every resize notification until disposed."""
        self.dispose()
        self._subscription = notifier.subscribe(self.render)
        return self._subscription

    def dispose(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None

    def __enter__(self) -> BaseChart:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def show_tooltip(
        self, x: float, y: float, page_x: float | None = None, page_y: float | None = None
    ) -> bool:
        """Show the tooltip for the element under logical point ``(x, y)``.

        The tooltip is positioned relative to ``(page_x, page_y)`` when given,
        otherwise relative to ``(x, y)``. Hides it when nothing is hit.
        """
        if self.tooltip is None:
            return False
        index = self.hit_test(x, y)
        if index is None:
            self.tooltip.hide()
            return False
        point = self.data[index]
        self.tooltip.show(
            x if page_x is None else page_x,
            y if page_y is None else page_y,
            f"{point.label}: {format_value(point.value)}",
        )
        return True

    def hit_test(self, x: float, y: float) -> int | None:
        """Return the dataset index drawn at logical point ``(x, y)``, if any."""
        if self.surface is None:
            return None
        box = self.box if self.width and self.height else self.surface.bounding_box()
        return self._hit_test(box, x, y)

    @abstractmethod
    def draw(self) -> None:
        """Clear the surface and draw the chart using the current layout."""
        pass

    @abstractmethod
    def _hit_test(self, box: BoundingBox, x: float, y: float) -> int | None:
        pass

    def _draw_title(self) -> None:
        if self.config.title:
            self.surface.fill_text(self.config.title, self.width / 2, TITLE_Y, TITLE_STYLE)

    def _draw_placeholder(self, x: float, y: float) -> None:
        self.surface.fill_text(PLACEHOLDER_TEXT, x, y, PLACEHOLDER_STYLE)
