from __future__ import annotations

from ..core.logging_config import get_logger
from .base import RenderSurface

logger = get_logger(__name__)


class SurfaceRegistry:
    """Name-to-surface lookup, the headless counterpart of finding a canvas by id."""

    def __init__(self) -> None:
        self._surfaces: dict[str, RenderSurface] = {}

    def register(self, name: str, surface: RenderSurface) -> None:
        if name in self._surfaces and self._surfaces[name] is not surface:
            raise ValueError(f"Surface '{name}' is already registered")
        self._surfaces[name] = surface

    def unregister(self, name: str) -> None:
        self._surfaces.pop(name, None)

    def resolve(self, name: str) -> RenderSurface | None:
        surface = self._surfaces.get(name)
        if surface is None:
            logger.debug("Surface not found", extra={"surface": name})
        return surface

    def __contains__(self, name: object) -> bool:
        return name in self._surfaces
