"""Utility helpers for the :mod:`pdf2pngx.tools.rasterizer` package."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from .exceptions import InvalidPageRangeError

FALLBACK_FILE_STEM = "No_File_Name"
PAGE_SUFFIX_TEMPLATE = "_page_{page_number}.png"


def is_buffer_source(source: object) -> bool:
    """Return ``True`` when ``source`` is an in-memory PDF buffer."""

    return isinstance(source, (bytes, bytearray, memoryview))


def validate_requested_pages(pages: Iterable[object] | None) -> None:
    """Ensure every explicitly requested page number is an integer ``>= 1``.

    Page numbers beyond the document length are valid here; they are skipped
    at render time.
    """

    if pages is None:
        return
    invalid = [
        page
        for page in pages
        if isinstance(page, bool) or not isinstance(page, int) or page < 1
    ]
    if invalid:
        raise InvalidPageRangeError(invalid)


def resolve_target_pages(total_pages: int, pages: Sequence[int] | None = None) -> List[int]:
    """Return the ordered page numbers to render.

    Args:
        total_pages: Number of pages in the opened document.
        pages: Explicit page numbers in caller order, or ``None`` for all pages.

    Returns:
        ``list(pages)`` with order and duplicates preserved, otherwise
        ``[1, ..., total_pages]``.
    """

    if pages is not None:
        return list(pages)
    return list(range(1, total_pages + 1))


def parse_page_numbers(pages: Iterable[int | str]) -> List[int]:
    """Convert CLI-style page tokens (``"3"``, ``"1,2"``) into integers."""

    parsed: List[int] = []
    for page in pages:
        if isinstance(page, str):
            tokens = [token.strip() for token in page.split(",") if token.strip()]
        else:
            tokens = [page]
        for token in tokens:
            try:
                parsed.append(int(token))
            except (TypeError, ValueError) as exc:
                raise InvalidPageRangeError([token]) from exc
    validate_requested_pages(parsed)
    return parsed


def derive_file_stem(source_path: Path | None, mask: str | None = None) -> str:
    """Return the stem used for output names.

    Path inputs use the file name without its extension. Buffer inputs, or
    paths with an empty stem, fall back to ``mask`` and then to
    :data:`FALLBACK_FILE_STEM`.
    """

    stem = source_path.stem if source_path is not None else ""
    if not stem:
        # An empty mask counts as no mask, so names never start with "_page_".
        stem = mask or FALLBACK_FILE_STEM
    return stem


def build_output_filename(stem: str, page_number: int) -> str:
    """Construct the PNG file name for ``page_number``."""

    return f"{stem}{PAGE_SUFFIX_TEMPLATE.format(page_number=page_number)}"


__all__ = [
    "FALLBACK_FILE_STEM",
    "build_output_filename",
    "derive_file_stem",
    "is_buffer_source",
    "parse_page_numbers",
    "resolve_target_pages",
    "validate_requested_pages",
]
