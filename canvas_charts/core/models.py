from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from .errors import DatasetError


@dataclass(frozen=True)
class BoundingBox:
    """Logical (device-independent) size of a drawing surface."""

    width: float
    height: float


@dataclass(frozen=True)
class DataPoint:
    """One labelled, non-negative value of a chart dataset."""

    label: str
    value: float

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label.strip():
            raise DatasetError(f"Data point label must be non-empty text, got {self.label!r}")
        if isinstance(self.value, bool):
            raise DatasetError(f"Data point value must be a number, got {self.value!r}")
        try:
            value = float(self.value)
        except (TypeError, ValueError) as e:
            raise DatasetError(
                f"Data point {self.label!r} has a non-numeric value: {self.value!r}"
            ) from e
        if not math.isfinite(value) or value < 0:
            raise DatasetError(
                f"Data point {self.label!r} must have a finite value >= 0, got {self.value!r}"
            )
        object.__setattr__(self, "value", value)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> DataPoint:
        if "label" not in raw or "value" not in raw:
            raise DatasetError(f"Data point needs 'label' and 'value' keys, got {dict(raw)!r}")
        return cls(label=raw["label"], value=raw["value"])


Dataset = tuple[DataPoint, ...]


def to_dataset(points: Iterable[Union[DataPoint, Mapping[str, Any]]]) -> Dataset:
    """Build an ordered dataset from DataPoints and/or ``{label, value}`` mappings."""
    dataset = []
    for point in points:
        if isinstance(point, DataPoint):
            dataset.append(point)
        elif isinstance(point, Mapping):
            dataset.append(DataPoint.from_dict(point))
        else:
            raise DatasetError(f"Unsupported data point: {point!r}")
    return tuple(dataset)


@dataclass(frozen=True)
class ChartConfig:
    """Presentation options shared by pie and bar charts.

    Unset fields fall back to per-chart defaults at render time; ``colors``
    is used by pie charts, ``color`` by bar charts.
    """

    title: str = ""
    colors: tuple[str, ...] | None = None
    padding: float | None = None
    color: str | None = None

    def __post_init__(self) -> None:
        if self.colors is not None:
            # a bare color string is a one-entry palette, not a sequence of characters
            colors = (self.colors,) if isinstance(self.colors, str) else tuple(self.colors)
            if not colors:
                raise DatasetError("ChartConfig.colors must not be empty when provided")
            object.__setattr__(self, "colors", colors)
        if self.padding is not None:
            if isinstance(self.padding, bool) or not isinstance(self.padding, (int, float)):
                raise DatasetError(f"ChartConfig.padding must be a number, got {self.padding!r}")
            if self.padding < 0:
                raise DatasetError(f"ChartConfig.padding must be >= 0, got {self.padding!r}")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> ChartConfig:
        raw = raw or {}
        colors = raw.get("colors")
        return cls(
            title=str(raw.get("title") or ""),
            colors=colors or None,
            padding=raw.get("padding"),
            color=raw.get("color"),
        )
