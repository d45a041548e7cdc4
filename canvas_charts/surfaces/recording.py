"""Headless surface that records drawing calls instead of rasterizing them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.models import BoundingBox
from .base import Path, RenderSurface, TextStyle


@dataclass(frozen=True)
class DrawCall:
    op: str
    args: tuple[Any, ...]


class RecordingSurface(RenderSurface):
    """In-memory RenderSurface used for tests and geometry inspection.

    ``resize`` plays the part of the host layout changing the element's
    logical size; the chart still has to call ``configure_surface`` to pick
    the new size up.
    """

    def __init__(self, width: float = 600, height: float = 400, pixel_ratio: float = 1.0):
        self._box = BoundingBox(width, height)
        self._pixel_ratio = pixel_ratio
        self.backing_size: tuple[int, int] = (int(width), int(height))
        self.scale = 1.0
        self.calls: list[DrawCall] = []

    def resize(self, width: float, height: float, pixel_ratio: float | None = None) -> None:
        self._box = BoundingBox(width, height)
        if pixel_ratio is not None:
            self._pixel_ratio = pixel_ratio

    def reset(self) -> None:
        """Forget recorded calls; backing size and scale are kept."""
        self.calls.clear()

    def snapshot(self) -> tuple[DrawCall, ...]:
        return tuple(self.calls)

    def calls_of(self, op: str) -> list[DrawCall]:
        return [call for call in self.calls if call.op == op]

    def texts(self) -> list[str]:
        return [call.args[0] for call in self.calls_of("fill_text")]

    def bounding_box(self) -> BoundingBox:
        return self._box

    @property
    def pixel_ratio(self) -> float:
        return self._pixel_ratio

    def set_backing_size(self, width: int, height: int) -> None:
        self.backing_size = (width, height)
        self.scale = 1.0
        self.calls.append(DrawCall("set_backing_size", (width, height)))

    def set_scale(self, ratio: float) -> None:
        self.scale = ratio
        self.calls.append(DrawCall("set_scale", (ratio,)))

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append(DrawCall("clear", (x, y, width, height)))

    def fill_path(self, path: Path, color: str) -> None:
        self.calls.append(DrawCall("fill_path", (path.segments, color)))

    def stroke_path(self, path: Path, color: str, line_width: float = 1.0) -> None:
        self.calls.append(DrawCall("stroke_path", (path.segments, color, line_width)))

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        self.calls.append(DrawCall("fill_rect", (x, y, width, height, color)))

    def fill_text(self, text: str, x: float, y: float, style: TextStyle) -> None:
        self.calls.append(DrawCall("fill_text", (text, x, y, style)))
