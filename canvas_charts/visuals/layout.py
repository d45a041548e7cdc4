"""Surface sizing and the pure geometry shared by the chart renderers.

Everything here works in logical pixels with the origin at the top-left
corner and y growing downward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.models import BoundingBox, Dataset
from ..surfaces.base import RenderSurface

TITLE_Y = 25
PIE_CENTER_OFFSET_Y = 10
PIE_LABEL_RADIUS = 0.7
PIE_START_ANGLE = -math.pi / 2
BAR_SLOT_FILL = 1.5
TICK_COUNT = 5
LABEL_MAX_CHARS = 10


def configure_surface(
    surface: RenderSurface, device_pixel_ratio: float | None = None
) -> BoundingBox:
    """Size the backing store for the current logical box and pixel ratio.

    The backing store becomes ``logical × ratio`` on both axes and the
    drawing transform is set (not multiplied) to ``ratio``, so calling this
    again with an unchanged box leaves the surface in the same state.

    Args:
        surface: Surface to configure
        device_pixel_ratio: Overrides the ratio reported by the surface

    Returns:
        The logical bounding box used for layout
    """
    ratio = device_pixel_ratio if device_pixel_ratio is not None else surface.pixel_ratio
    if not ratio or ratio <= 0:
        ratio = 1.0
    box = surface.bounding_box()
    surface.set_backing_size(int(round(box.width * ratio)), int(round(box.height * ratio)))
    surface.set_scale(ratio)
    return box


def truncate_label(label: str, limit: int = LABEL_MAX_CHARS) -> str:
    if len(label) > limit:
        return label[:limit] + "..."
    return label


def format_value(value: float) -> str:
    """Format a data value the way it is shown in labels and legends."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def dataset_total(dataset: Dataset) -> float:
    return math.fsum(point.value for point in dataset)


# ---------------------------------------------------------------------------
# Pie geometry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SliceGeometry:
    index: int
    start: float
    end: float
    fraction: float
    label_x: float
    label_y: float

    @property
    def sweep(self) -> float:
        return self.end - self.start

    @property
    def percentage_text(self) -> str:
        return f"{self.fraction * 100:.1f}%"


def pie_center(box: BoundingBox) -> tuple[float, float]:
    return box.width / 2, box.height / 2 + PIE_CENTER_OFFSET_Y


def pie_radius(box: BoundingBox, padding: float) -> float:
    return max(0.0, min(box.width, box.height) / 2 - padding)


def compute_slices(dataset: Dataset, box: BoundingBox, padding: float) -> list[SliceGeometry]:
    """Lay out pie slices clockwise from 12 o'clock in dataset order.

    Zero-value points get no slice and do not move the next start angle.
    A dataset whose total is zero yields no slices at all.
    """
    total = dataset_total(dataset)
    if total <= 0:
        return []

    cx, cy = pie_center(box)
    label_radius = pie_radius(box, padding) * PIE_LABEL_RADIUS
    slices = []
    current = PIE_START_ANGLE
    for index, point in enumerate(dataset):
        if point.value == 0:
            continue
        fraction = point.value / total
        sweep = fraction * 2 * math.pi
        bisector = current + sweep / 2
        slices.append(
            SliceGeometry(
                index=index,
                start=current,
                end=current + sweep,
                fraction=fraction,
                label_x=cx + math.cos(bisector) * label_radius,
                label_y=cy + math.sin(bisector) * label_radius,
            )
        )
        current += sweep
    return slices


def slice_at_point(
    slices: list[SliceGeometry], box: BoundingBox, padding: float, x: float, y: float
) -> int | None:
    """Return the dataset index of the slice under ``(x, y)``, if any."""
    cx, cy = pie_center(box)
    dx, dy = x - cx, y - cy
    if math.hypot(dx, dy) > pie_radius(box, padding):
        return None
    angle = math.atan2(dy, dx)
    while angle < PIE_START_ANGLE:
        angle += 2 * math.pi
    for geometry in slices:
        if geometry.start <= angle < geometry.end:
            return geometry.index
    # The last slice ends exactly at start + 2π
    if slices and math.isclose(angle, slices[-1].end):
        return slices[-1].index
    return None


# ---------------------------------------------------------------------------
# Bar geometry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BarGeometry:
    index: int
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass(frozen=True)
class Tick:
    value: int
    y: float


@dataclass(frozen=True)
class BarLayout:
    left: float
    top: float
    chart_width: float
    chart_height: float
    max_value: float | None
    bars: tuple[BarGeometry, ...]
    ticks: tuple[Tick, ...]

    @property
    def right(self) -> float:
        return self.left + self.chart_width

    @property
    def baseline(self) -> float:
        return self.top + self.chart_height


def compute_bars(dataset: Dataset, box: BoundingBox, padding: float) -> BarLayout:
    """Lay out one bar per point in equal slots across the plot area.

    Bars fill two thirds of their slot and scale against the dataset maximum.
    An empty dataset has no maximum, so it gets neither bars nor ticks; an
    all-zero dataset gets zero-height bars and ticks that all read 0.
    """
    chart_width = max(0.0, box.width - padding * 2)
    chart_height = max(0.0, box.height - padding * 2)
    baseline = padding + chart_height

    if not dataset:
        return BarLayout(padding, padding, chart_width, chart_height, None, (), ())

    n = len(dataset)
    max_value = max(point.value for point in dataset)
    bar_width = chart_width / (n * BAR_SLOT_FILL)
    slot = chart_width / n

    bars = []
    for index, point in enumerate(dataset):
        height = point.value / max_value * chart_height if max_value > 0 else 0.0
        x = padding + index * slot + (slot - bar_width) / 2
        bars.append(BarGeometry(index=index, x=x, y=baseline - height, width=bar_width, height=height))

    ticks = tuple(
        Tick(value=round_half_up(max_value / TICK_COUNT * i), y=baseline - i / TICK_COUNT * chart_height)
        for i in range(TICK_COUNT + 1)
    )
    return BarLayout(padding, padding, chart_width, chart_height, max_value, tuple(bars), ticks)


def bar_at_point(layout: BarLayout, x: float, y: float) -> int | None:
    """Return the dataset index of the bar whose rectangle contains ``(x, y)``."""
    for bar in layout.bars:
        if bar.x <= x <= bar.x + bar.width and bar.y <= y <= layout.baseline:
            return bar.index
    return None
