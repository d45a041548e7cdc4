"""Deterministic color assignment for dataset entries."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_PALETTE: tuple[str, ...] = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#FFA07A",
    "#98D8C8",
    "#F7DC6F",
    "#BB8FCE",
    "#85C1E2",
)


def palette_for(count: int, colors: Sequence[str] | None = None) -> list[str]:
    """Return the colors for ``count`` entries.

    Configured colors are returned verbatim; otherwise the default palette
    is cycled so entry ``i`` gets ``DEFAULT_PALETTE[i % 8]``.
    """
    if colors:
        return list(colors)
    return [DEFAULT_PALETTE[i % len(DEFAULT_PALETTE)] for i in range(max(count, 0))]


def color_at(index: int, palette: Sequence[str]) -> str:
    # A short configured palette repeats instead of running out
    return palette[index % len(palette)]
