"""Custom exceptions raised by :mod:`pdf2pngx.tools.rasterizer`."""

from __future__ import annotations

from typing import Iterable


class Pdf2PngError(Exception):
    """Base exception for all errors raised by :mod:`pdf2pngx`."""


class NotFoundError(Pdf2PngError, FileNotFoundError):
    """Raised when a source path does not reference an existing file."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"PDF file not found on: {path}.")


class InvalidPageRangeError(Pdf2PngError):
    """Raised when requested page numbers are not positive integers."""

    def __init__(self, pages: Iterable[object]) -> None:
        self.pages = list(pages)
        message = f"Invalid pages requested, page numbers must be >= 1: {self.pages!r}"
        super().__init__(message)


class DocumentOpenError(Pdf2PngError):
    """Raised when the document engine cannot open or decrypt a PDF."""


class RenderError(Pdf2PngError):
    """Raised when a single page fails to render or encode."""

    def __init__(self, page_number: int, reason: str) -> None:
        self.page_number = page_number
        super().__init__(f"Failed to render page {page_number}: {reason}")


class PersistError(Pdf2PngError):
    """Raised when rendered output cannot be written to the output directory."""


__all__ = [
    "Pdf2PngError",
    "NotFoundError",
    "InvalidPageRangeError",
    "DocumentOpenError",
    "RenderError",
    "PersistError",
]
