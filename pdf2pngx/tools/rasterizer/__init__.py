"""PDF → PNG rasterization exposed through the pdf2pngx tools namespace."""

from __future__ import annotations

from .converter import PdfToPngConverter, convert
from .exceptions import (
    DocumentOpenError,
    InvalidPageRangeError,
    NotFoundError,
    Pdf2PngError,
    PersistError,
    RenderError,
)
from .types import ConversionOptions, EngineOptions, PageOutputRecord, SurfaceAndContext, Viewport
from .utils import (
    FALLBACK_FILE_STEM,
    build_output_filename,
    derive_file_stem,
    parse_page_numbers,
    resolve_target_pages,
    validate_requested_pages,
)
from .validators import get_pdf_info, validate_pdf

__all__ = [
    "convert",
    "PdfToPngConverter",
    "ConversionOptions",
    "EngineOptions",
    "PageOutputRecord",
    "SurfaceAndContext",
    "Viewport",
    "get_pdf_info",
    "validate_pdf",
    "FALLBACK_FILE_STEM",
    "build_output_filename",
    "derive_file_stem",
    "parse_page_numbers",
    "resolve_target_pages",
    "validate_requested_pages",
    "Pdf2PngError",
    "NotFoundError",
    "InvalidPageRangeError",
    "DocumentOpenError",
    "RenderError",
    "PersistError",
]
