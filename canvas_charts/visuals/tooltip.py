"""Floating tooltip overlay shared by any number of charts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from ..core.logging_config import get_logger

logger = get_logger(__name__)

TOOLTIP_OFFSET = 10


class TooltipOverlay(Protocol):
    text: str
    left: float
    top: float
    visible: bool


@dataclass
class OverlayElement:
    """Headless overlay element positioned in page coordinates."""

    class_name: str = "chart-tooltip"
    text: str = ""
    left: float = 0.0
    top: float = 0.0
    visible: bool = False


class ChartTooltip:
    """Show and hide a single floating label.

    The overlay is created on the first ``show`` and reused afterwards;
    ``hide`` never destroys it. Visibility is entirely caller-controlled.
    """

    def __init__(self, overlay_factory: Callable[[], TooltipOverlay] = OverlayElement):
        self._overlay_factory = overlay_factory
        self.overlay: TooltipOverlay | None = None

    @property
    def visible(self) -> bool:
        return self.overlay is not None and self.overlay.visible

    def show(self, x: float, y: float, text: str) -> None:
        if self.overlay is None:
            self.overlay = self._overlay_factory()
            logger.debug("Tooltip overlay created")
        self.overlay.text = text
        self.overlay.left = x + TOOLTIP_OFFSET
        self.overlay.top = y + TOOLTIP_OFFSET
        self.overlay.visible = True

    def hide(self) -> None:
        if self.overlay is not None:
            self.overlay.visible = False
