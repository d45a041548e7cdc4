"""Raster RenderSurface backed by a matplotlib Agg figure."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path as FilePath

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon, Rectangle

from ..core.enums import TextBaseline
from ..core.errors import SurfaceError
from ..core.logging_config import get_logger
from ..core.models import BoundingBox
from .base import Path, RenderSurface, TextStyle

logger = get_logger(__name__)

# One logical pixel maps to one point, so font sizes and line widths carry over
POINTS_PER_INCH = 72

_VERTICAL_ALIGNMENT = {
    TextBaseline.TOP: "top",
    TextBaseline.MIDDLE: "center",
    TextBaseline.BOTTOM: "bottom",
    TextBaseline.ALPHABETIC: "baseline",
}


class MatplotlibSurface(RenderSurface):
    """Draw charts into a PNG-exportable matplotlib figure.

    The figure has a single borderless axes whose data coordinates are the
    logical pixel grid with the origin top-left and y pointing down. The
    figure dpi is ``72 × scale`` so the exported image has exactly the
    backing-store resolution.
    """

    def __init__(
        self,
        width: float = 600,
        height: float = 400,
        pixel_ratio: float = 1.0,
        background: str = "#ffffff",
    ):
        self._box = BoundingBox(width, height)
        self._pixel_ratio = pixel_ratio
        self.background = background
        self._backing: tuple[int, int] = (int(round(width)), int(round(height)))
        self._scale = 1.0
        self._new_figure()

    @property
    def backing_size(self) -> tuple[int, int]:
        return self._backing

    @property
    def scale(self) -> float:
        return self._scale

    def resize(self, width: float, height: float, pixel_ratio: float | None = None) -> None:
        self._box = BoundingBox(width, height)
        if pixel_ratio is not None:
            self._pixel_ratio = pixel_ratio

    def bounding_box(self) -> BoundingBox:
        return self._box

    @property
    def pixel_ratio(self) -> float:
        return self._pixel_ratio

    def set_backing_size(self, width: int, height: int) -> None:
        self._backing = (int(width), int(height))
        self._scale = 1.0
        self._new_figure()

    def set_scale(self, ratio: float) -> None:
        if ratio <= 0:
            raise SurfaceError(f"Surface scale must be positive, got {ratio}")
        self._scale = ratio
        self._apply_geometry()

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        logical_w, logical_h = self._logical_extent()
        if x <= 0 and y <= 0 and x + width >= logical_w and y + height >= logical_h:
            for artist in [*self._axes.patches, *self._axes.lines, *self._axes.texts]:
                artist.remove()
            return
        self._axes.add_patch(
            Rectangle((x, y), width, height, facecolor=self.background, edgecolor="none")
        )

    def fill_path(self, path: Path, color: str) -> None:
        for vertices, _closed in path.to_polygons():
            if len(vertices) < 3:
                continue
            self._axes.add_patch(
                Polygon(vertices, closed=True, facecolor=color, edgecolor="none", linewidth=0)
            )

    def stroke_path(self, path: Path, color: str, line_width: float = 1.0) -> None:
        for vertices, closed in path.to_polygons():
            if closed:
                self._axes.add_patch(
                    Polygon(
                        vertices,
                        closed=True,
                        fill=False,
                        edgecolor=color,
                        linewidth=line_width,
                        joinstyle="miter",
                    )
                )
            else:
                self._axes.add_line(
                    Line2D(
                        vertices[:, 0],
                        vertices[:, 1],
                        color=color,
                        linewidth=line_width,
                        solid_capstyle="butt",
                    )
                )

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        self._axes.add_patch(
            Rectangle((x, y), width, height, facecolor=color, edgecolor="none", linewidth=0)
        )

    def fill_text(self, text: str, x: float, y: float, style: TextStyle) -> None:
        self._axes.text(
            x,
            y,
            text,
            fontsize=style.size,
            fontweight="bold" if style.bold else "normal",
            family="sans-serif",
            color=style.color,
            ha=style.align.value,
            va=_VERTICAL_ALIGNMENT[style.baseline],
            parse_math=False,
        )

    def to_png(self) -> bytes:
        """Rasterize the figure at backing-store resolution."""
        buffer = BytesIO()
        try:
            self.figure.savefig(buffer, format="png", facecolor=self.background)
            return buffer.getvalue()
        except (OSError, ValueError) as e:
            raise SurfaceError(f"Failed to rasterize chart: {e}") from e
        finally:
            buffer.close()

    def to_base64(self) -> str:
        return base64.b64encode(self.to_png()).decode("utf-8")

    def save(self, filepath: FilePath) -> FilePath:
        filepath = FilePath(filepath)
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            filepath.write_bytes(self.to_png())
        except OSError as e:
            logger.warning(f"Failed to save chart to {filepath}: {e}")
            raise SurfaceError(f"Failed to save chart to {filepath}: {e}") from e
        logger.debug(f"Chart saved to {filepath}")
        return filepath

    def _logical_extent(self) -> tuple[float, float]:
        width, height = self._backing
        return width / self._scale, height / self._scale

    def _new_figure(self) -> None:
        fig = Figure()
        FigureCanvasAgg(fig)  # Attach canvas backend
        fig.patch.set_facecolor(self.background)
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_axis_off()
        ax.set_autoscale_on(False)
        self.figure = fig
        self._axes = ax
        self._apply_geometry()

    def _apply_geometry(self) -> None:
        dpi = POINTS_PER_INCH * self._scale
        width, height = self._backing
        self.figure.set_dpi(dpi)
        self.figure.set_size_inches(max(width, 1) / dpi, max(height, 1) / dpi)
        logical_w, logical_h = self._logical_extent()
        self._axes.set_xlim(0, max(logical_w, 1))
        self._axes.set_ylim(max(logical_h, 1), 0)
