"""Render PDF pages to PNG images, in memory or on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from .tools import load_builtin_plugins
from .tools import rasterizer as png
from .tools.common.interfaces import ConversionContext
from .tools.common.pipeline import ToolRegistry, register_tool, registry
from .tools.rasterizer import (
    ConversionOptions,
    DocumentOpenError,
    InvalidPageRangeError,
    NotFoundError,
    PageOutputRecord,
    Pdf2PngError,
    PdfToPngConverter,
    PersistError,
    RenderError,
    convert,
    get_pdf_info,
    validate_pdf,
)
from .tools.rasterizer.types import SourceInput

load_builtin_plugins()

__version__ = "0.1.0"

__all__ = [
    "png",
    "convert",
    "convert_document",
    "get_document_info",
    "get_pdf_info",
    "validate_pdf",
    "PdfToPngConverter",
    "ConversionOptions",
    "PageOutputRecord",
    "ConversionContext",
    "ToolRegistry",
    "registry",
    "register_tool",
    "Pdf2PngError",
    "NotFoundError",
    "InvalidPageRangeError",
    "DocumentOpenError",
    "RenderError",
    "PersistError",
    "__version__",
]


def convert_document(
    source: SourceInput,
    output_dir: str | Path | None = None,
    *,
    pages: Sequence[int] | None = None,
    viewport_scale: float = 1.0,
    password: str | None = None,
    output_file_mask: str | None = None,
    **options: Any,
) -> list[PageOutputRecord]:
    """Synchronous convenience wrapper around the ``convert_png`` plugin."""

    config_options = {
        "pages": pages,
        "viewport_scale": viewport_scale,
        "password": password,
        "output_file_mask": output_file_mask,
        **options,
    }
    if isinstance(source, (str, Path)):
        context = ConversionContext(input_path=source, output_path=output_dir, config={"options": config_options})
    else:
        context = ConversionContext(output_path=output_dir, config={"source": source, "options": config_options})
    tool = registry.create("convert_png", context)
    return tool.run()


def get_document_info(source: SourceInput, password: str | None = None) -> dict[str, Any]:
    """Convenience wrapper around the ``info`` plugin."""

    if isinstance(source, (str, Path)):
        context = ConversionContext(input_path=source, config={"password": password})
    else:
        context = ConversionContext(config={"source": source, "password": password})
    tool = registry.create("info", context)
    return tool.run()
