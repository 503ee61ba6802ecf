"""PyMuPDF backend implementation for the rasterizer."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

import fitz  # PyMuPDF

from ....core.utils import get_logger
from ..exceptions import DocumentOpenError
from ..types import EngineOptions, SurfaceAndContext, Viewport
from .base import BackendDocument, BackendPage, DocumentEngine, SurfaceProvider

LOGGER = get_logger("pdf2pngx.tools.rasterizer.pymupdf")

# MuPDF is not thread-safe; worker threads must take turns.
_MUPDF_LOCK = threading.RLock()


class PixmapSurface:
    """Surface backed by an RGB :class:`fitz.Pixmap`."""

    def __init__(self, pixmap: fitz.Pixmap) -> None:
        self.pixmap: fitz.Pixmap | None = pixmap
        self.width = pixmap.width
        self.height = pixmap.height

    def encode_png(self) -> bytes:
        if self.pixmap is None:
            raise RuntimeError("Surface has already been destroyed")
        with _MUPDF_LOCK:
            return self.pixmap.tobytes("png")


class PixmapSurfaceProvider(SurfaceProvider):
    """Surface provider allocating opaque pixmaps filled with ``background``."""

    def __init__(self, background: int = 255) -> None:
        self.background = background

    def create(self, width: int, height: int) -> SurfaceAndContext:
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid surface size: {width}x{height}")
        with _MUPDF_LOCK:
            pixmap = fitz.Pixmap(fitz.csRGB, fitz.IRect(0, 0, width, height), False)
            pixmap.clear_with(self.background)
        return SurfaceAndContext(surface=PixmapSurface(pixmap), context=pixmap)

    def destroy(self, target: SurfaceAndContext) -> None:
        if isinstance(target.surface, PixmapSurface):
            target.surface.pixmap = None
        target.context = None


@dataclass
class PymupdfPage(BackendPage):
    number: int
    page: fitz.Page

    def get_viewport(self, scale: float) -> Viewport:
        with _MUPDF_LOCK:
            bounds = (self.page.rect * fitz.Matrix(scale, scale)).irect
        return Viewport(width=bounds.width, height=bounds.height, scale=scale)

    def render(
        self,
        *,
        context: Any,
        viewport: Viewport,
        surface_provider: SurfaceProvider,
    ) -> None:
        if not isinstance(context, fitz.Pixmap):
            raise TypeError("PyMuPDF pages can only render into fitz.Pixmap contexts")
        matrix = fitz.Matrix(viewport.scale, viewport.scale)
        # PyMuPDF exposes no stable call that rasterizes a page into an existing
        # pixmap, so the page is drawn into a scratch pixmap and copied over.
        # Both rasters are alive until the copy finishes.
        with _MUPDF_LOCK:
            rendered = self.page.get_pixmap(matrix=matrix, alpha=False)
            context.copy(rendered, rendered.irect)
            del rendered


@dataclass
class PymupdfDocument(BackendDocument):
    document: fitz.Document

    def get_page(self, number: int) -> PymupdfPage:
        with _MUPDF_LOCK:
            page = self.document.load_page(number - 1)
        return PymupdfPage(number=number, page=page)

    def close(self) -> None:
        with _MUPDF_LOCK:
            if not self.document.is_closed:
                self.document.close()


class PymupdfEngine(DocumentEngine):
    """Document engine that uses PyMuPDF (MuPDF) under the hood.

    MuPDF ships its own font handling, so ``disable_font_face`` and
    ``use_system_fonts`` are accepted for contract compatibility but do not
    change the rendered output.
    """

    def open(self, data: bytes, options: EngineOptions) -> PymupdfDocument:
        if options.use_system_fonts or not options.disable_font_face:
            LOGGER.debug(
                "Font options (disable_font_face=%s, use_system_fonts=%s) have no effect with PyMuPDF",
                options.disable_font_face,
                options.use_system_fonts,
            )

        with _MUPDF_LOCK:
            try:
                document = fitz.open(stream=data, filetype="pdf")
            except Exception as exc:
                raise DocumentOpenError(f"Corrupted or invalid PDF document. Error: {exc}") from exc

            if document.needs_pass:
                if not options.password:
                    document.close()
                    raise DocumentOpenError("PDF is encrypted. Supply a password to process this file.")
                if not document.authenticate(options.password):
                    document.close()
                    raise DocumentOpenError("Failed to decrypt PDF with supplied password.")

            page_count = document.page_count

        LOGGER.debug("Opened PDF document with %s pages", page_count)
        return PymupdfDocument(page_count=page_count, document=document)
