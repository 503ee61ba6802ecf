"""Backend protocols for PDF rasterization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from ..types import EngineOptions, SurfaceAndContext, Viewport


class Surface(Protocol):
    """Drawable raster area that can be encoded to PNG."""

    width: int
    height: int

    def encode_png(self) -> bytes:
        """Return the surface content as PNG bytes."""


class SurfaceProvider(Protocol):
    """Allocates drawable surfaces sized to a page viewport."""

    def create(self, width: int, height: int) -> SurfaceAndContext:
        """Return a new surface and its drawing context."""

    def destroy(self, target: SurfaceAndContext) -> None:
        """Release resources held by ``target``."""


class BackendPage:
    """A single page loaded by a :class:`DocumentEngine`."""

    number: int

    def get_viewport(self, scale: float) -> Viewport:
        raise NotImplementedError

    def render(
        self,
        *,
        context: Any,
        viewport: Viewport,
        surface_provider: SurfaceProvider,
    ) -> None:
        raise NotImplementedError


@dataclass
class BackendDocument:
    """Represents an opened PDF document with backend-specific helpers."""

    page_count: int

    def get_page(self, number: int) -> BackendPage:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError


class DocumentEngine(Protocol):
    """Protocol defining the document operations needed for rasterization."""

    def open(self, data: bytes, options: EngineOptions) -> BackendDocument:
        """Parse ``data`` and return a document wrapper."""
