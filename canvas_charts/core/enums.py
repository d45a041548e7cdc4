from __future__ import annotations

from enum import Enum


class ChartKind(str, Enum):
    PIE = "pie"
    BAR = "bar"


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextBaseline(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"
    ALPHABETIC = "alphabetic"
