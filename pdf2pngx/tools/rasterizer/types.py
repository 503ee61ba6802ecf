"""Type definitions and dataclasses for the PDF → PNG rasterizer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence, Union

SourceInput = Union[str, os.PathLike, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class ConversionOptions:
    """
    Options controlling PDF → PNG conversion.

    Attributes:
        viewport_scale: Zoom factor applied to each page (1.0 renders 72 DPI)
        output_dir: Directory receiving the PNG files, or ``None`` to keep
            the output in memory only
        disable_font_face: Engine hint to avoid loading embedded font faces
        use_system_fonts: Engine hint to resolve missing fonts from the host
        password: Password used to open encrypted documents
        output_file_mask: File stem used when the source has no file name
        pages: 1-based page numbers in render order; ``None`` renders all pages
    """

    viewport_scale: float = 1.0
    output_dir: str | Path | None = None
    disable_font_face: bool = True
    use_system_fonts: bool = False
    password: str | None = None
    output_file_mask: str | None = None
    pages: Sequence[int] | None = None

    def __post_init__(self) -> None:
        if not self.viewport_scale > 0:
            raise ValueError("viewport_scale must be a positive number")
        if self.pages is not None:
            object.__setattr__(self, "pages", tuple(self.pages))

    def __repr__(self) -> str:
        password = "<provided>" if self.password else None
        return (
            f"ConversionOptions(viewport_scale={self.viewport_scale!r}, output_dir={self.output_dir!r}, "
            f"disable_font_face={self.disable_font_face!r}, use_system_fonts={self.use_system_fonts!r}, "
            f"password={password!r}, output_file_mask={self.output_file_mask!r}, pages={self.pages!r})"
        )


@dataclass(frozen=True)
class EngineOptions:
    """Options forwarded to the document engine when opening a PDF."""

    disable_font_face: bool = True
    use_system_fonts: bool = False
    password: str | None = None

    @classmethod
    def from_conversion_options(cls, options: ConversionOptions) -> "EngineOptions":
        return cls(
            disable_font_face=options.disable_font_face,
            use_system_fonts=options.use_system_fonts,
            password=options.password or None,
        )


@dataclass(frozen=True)
class Viewport:
    """Pixel geometry of a page at a given scale."""

    width: int
    height: int
    scale: float


@dataclass
class SurfaceAndContext:
    """A drawable surface paired with the drawing context rendering targets."""

    surface: Any
    context: Any


@dataclass(frozen=True)
class PageOutputRecord:
    """
    PNG output for a single rendered page.

    Attributes:
        name: Derived file name, ``<stem>_page_<number>.png``
        content: Encoded PNG bytes
        path: Absolute path of the written file, empty when not persisted
        page_number: 1-based page number the record was rendered from
        width: Image width in pixels
        height: Image height in pixels
    """

    name: str
    content: bytes
    path: str = ""
    page_number: int = 0
    width: int = 0
    height: int = 0

    def __repr__(self) -> str:
        return (
            f"PageOutputRecord(name={self.name!r}, bytes={len(self.content)}, "
            f"path={self.path!r}, page_number={self.page_number})"
        )


__all__ = [
    "ConversionOptions",
    "EngineOptions",
    "PageOutputRecord",
    "SourceInput",
    "SurfaceAndContext",
    "Viewport",
]
