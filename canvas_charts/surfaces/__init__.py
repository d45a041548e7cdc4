"""Drawing surfaces that charts render onto.

Main Components:
    - RenderSurface: abstract capability interface (clear, fill/stroke paths, text,
      bounding box, device pixel ratio)
    - RecordingSurface: headless surface that records draw calls (tests, inspection)
    - MatplotlibSurface: Agg-backed raster surface with PNG/base64 export
    - SurfaceRegistry: resolves surfaces by name
"""

from __future__ import annotations

from .base import Path, RenderSurface, TextStyle
from .matplotlib_surface import MatplotlibSurface
from .recording import DrawCall, RecordingSurface
from .registry import SurfaceRegistry

__all__ = [
    "DrawCall",
    "MatplotlibSurface",
    "Path",
    "RecordingSurface",
    "RenderSurface",
    "SurfaceRegistry",
    "TextStyle",
]
