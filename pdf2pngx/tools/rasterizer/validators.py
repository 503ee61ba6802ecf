"""Validation helpers for :mod:`pdf2pngx.tools.rasterizer`."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Dict

from pypdf import PdfReader

from ...core.utils import resolve_path
from .exceptions import DocumentOpenError, NotFoundError, PersistError
from .types import SourceInput
from .utils import is_buffer_source


def ensure_source_exists(path: str | Path) -> Path:
    """Return the resolved ``path`` or raise :class:`NotFoundError`."""

    resolved = resolve_path(path)
    if not resolved.is_file():
        raise NotFoundError(path)
    return resolved


def ensure_output_directory(path: str | Path) -> Path:
    """Create ``path`` (and parents) if needed and return it resolved."""

    resolved = resolve_path(path)
    try:
        resolved.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PersistError(f"Unable to create output directory: {resolved}. Error: {exc}") from exc
    return resolved


def _open_reader(source: SourceInput, password: str | None) -> tuple[PdfReader, str]:
    if is_buffer_source(source):
        label = "<buffer>"
        stream: Any = io.BytesIO(bytes(source))
    else:
        pdf_path = ensure_source_exists(source)
        label = str(pdf_path)
        stream = str(pdf_path)

    try:
        reader = PdfReader(stream)
    except Exception as exc:  # pragma: no cover - pypdf exceptions vary
        raise DocumentOpenError(f"Failed to read PDF: {label}") from exc

    if reader.is_encrypted:
        try:
            decrypted = reader.decrypt(password or "")
        except Exception as exc:  # pragma: no cover - optional behaviour
            raise DocumentOpenError(f"Unable to decrypt PDF: {label}") from exc
        if not decrypted:
            raise DocumentOpenError(f"Encrypted PDF requires a valid password: {label}")

    return reader, label


def validate_pdf(source: SourceInput, password: str | None = None) -> bool:
    """Validate that ``source`` is a readable PDF document with pages."""

    reader, label = _open_reader(source, password)
    if len(reader.pages) == 0:
        raise DocumentOpenError(f"PDF contains no pages: {label}")
    return True


def get_pdf_info(source: SourceInput, password: str | None = None) -> Dict[str, Any]:
    """Return basic metadata about a PDF document."""

    reader, label = _open_reader(source, password)
    metadata = {key: str(value) for key, value in (reader.metadata or {}).items()}
    info: Dict[str, Any] = {
        "path": label,
        "pages": len(reader.pages),
        "is_encrypted": reader.is_encrypted,
        "metadata": metadata,
    }
    return info


__all__ = ["ensure_output_directory", "ensure_source_exists", "get_pdf_info", "validate_pdf"]
