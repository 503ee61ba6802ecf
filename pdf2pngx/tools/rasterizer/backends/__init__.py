"""Backend abstractions for the rasterizer."""

from .base import BackendDocument, BackendPage, DocumentEngine, Surface, SurfaceProvider
from .pymupdf_backend import PixmapSurface, PixmapSurfaceProvider, PymupdfEngine

__all__ = [
    "BackendDocument",
    "BackendPage",
    "DocumentEngine",
    "PixmapSurface",
    "PixmapSurfaceProvider",
    "PymupdfEngine",
    "Surface",
    "SurfaceProvider",
]
