"""RenderSurface interface that every drawing backend implements."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from ..core.enums import TextAlign, TextBaseline
from ..core.models import BoundingBox

# Arc flattening density used when a backend needs polygons
ARC_POINTS_PER_RADIAN = 24


@dataclass(frozen=True)
class TextStyle:
    """Font and placement options for ``fill_text``.

    Sizes are in logical pixels, like a CSS ``font`` shorthand.
    """

    size: float = 12
    bold: bool = False
    color: str = "#333"
    align: TextAlign = TextAlign.LEFT
    baseline: TextBaseline = TextBaseline.ALPHABETIC
    family: str = "Arial"

    @property
    def font(self) -> str:
        weight = "bold " if self.bold else ""
        return f"{weight}{self.size:g}px {self.family}"


@dataclass(frozen=True)
class PathSegment:
    op: str
    args: tuple[float, ...] = ()


class Path:
    """A vector path in logical coordinates with y growing downward.

    Arcs follow canvas conventions: angles in radians, 0 points right and
    positive sweeps run clockwise on screen.
    """

    def __init__(self) -> None:
        self._segments: list[PathSegment] = []

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return tuple(self._segments)

    def move_to(self, x: float, y: float) -> Path:
        self._segments.append(PathSegment("move_to", (float(x), float(y))))
        return self

    def line_to(self, x: float, y: float) -> Path:
        self._segments.append(PathSegment("line_to", (float(x), float(y))))
        return self

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> Path:
        self._segments.append(
            PathSegment("arc", (float(cx), float(cy), float(radius), float(start), float(end)))
        )
        return self

    def close(self) -> Path:
        self._segments.append(PathSegment("close"))
        return self

    @classmethod
    def rect(cls, x: float, y: float, width: float, height: float) -> Path:
        return (
            cls()
            .move_to(x, y)
            .line_to(x + width, y)
            .line_to(x + width, y + height)
            .line_to(x, y + height)
            .close()
        )

    @classmethod
    def line(cls, x1: float, y1: float, x2: float, y2: float) -> Path:
        return cls().move_to(x1, y1).line_to(x2, y2)

    @classmethod
    def circle(cls, cx: float, cy: float, radius: float) -> Path:
        return cls().move_to(cx + radius, cy).arc(cx, cy, radius, 0.0, 2 * math.pi).close()

    @classmethod
    def wedge(cls, cx: float, cy: float, radius: float, start: float, end: float) -> Path:
        return cls().move_to(cx, cy).arc(cx, cy, radius, start, end).close()

    def to_polygons(self) -> list[tuple[np.ndarray, bool]]:
        """Flatten the path into ``(vertices, closed)`` sub-paths.

        ``vertices`` is an ``(n, 2)`` array; arcs are sampled with
        ``ARC_POINTS_PER_RADIAN`` points per radian of sweep.
        """
        polygons: list[tuple[np.ndarray, bool]] = []
        current: list[np.ndarray] = []

        def flush(closed: bool) -> None:
            if current:
                polygons.append((np.vstack(current), closed))
                current.clear()

        for seg in self._segments:
            if seg.op == "move_to":
                flush(False)
                current.append(np.array([seg.args]))
            elif seg.op == "line_to":
                current.append(np.array([seg.args]))
            elif seg.op == "arc":
                cx, cy, r, start, end = seg.args
                n = max(2, int(math.ceil(abs(end - start) * ARC_POINTS_PER_RADIAN)) + 1)
                theta = np.linspace(start, end, n)
                current.append(np.column_stack((cx + r * np.cos(theta), cy + r * np.sin(theta))))
            elif seg.op == "close":
                flush(True)
        flush(False)
        return polygons

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._segments == other._segments

    def __repr__(self) -> str:
        return f"Path({self._segments!r})"


class RenderSurface(ABC):
    """Abstract 2D drawing target with a logical size and a device pixel ratio.

    A surface is owned by exactly one chart. Drawing calls use logical pixel
    coordinates once ``set_scale`` has been applied.

    Implementations must make ``set_backing_size`` reset any previous scale
    so that re-applying the same size and scale never accumulates.
    """

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        """Return the current logical width and height."""
        pass

    @property
    @abstractmethod
    def pixel_ratio(self) -> float:
        """Physical pixels per logical pixel reported by the host."""
        pass

    @abstractmethod
    def set_backing_size(self, width: int, height: int) -> None:
        """Resize the physical backing store and reset the transform."""
        pass

    @abstractmethod
    def set_scale(self, ratio: float) -> None:
        """Apply a uniform scale from logical to physical pixels."""
        pass

    @abstractmethod
    def clear(self, x: float, y: float, width: float, height: float) -> None:
        pass

    @abstractmethod
    def fill_path(self, path: Path, color: str) -> None:
        pass

    @abstractmethod
    def stroke_path(self, path: Path, color: str, line_width: float = 1.0) -> None:
        pass

    @abstractmethod
    def fill_text(self, text: str, x: float, y: float, style: TextStyle) -> None:
        pass

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        self.fill_path(Path.rect(x, y, width, height), color)

    def stroke_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str, line_width: float = 1.0
    ) -> None:
        self.stroke_path(Path.line(x1, y1, x2, y2), color, line_width)
