from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf2pngx.tools.rasterizer.backends.base import BackendDocument, BackendPage  # noqa: E402
from pdf2pngx.tools.rasterizer.converter import PNG_SIGNATURE  # noqa: E402
from pdf2pngx.tools.rasterizer.types import EngineOptions, SurfaceAndContext, Viewport  # noqa: E402

SAMPLE_PAGE_SIZES = [(200, 200), (100, 300), (612, 792)]


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "sample.pdf"
    writer = PdfWriter()
    for width, height in SAMPLE_PAGE_SIZES:
        writer.add_blank_page(width=width, height=height)
    writer.add_metadata({"/Producer": "pdf2pngx-tests", "/Title": "Sample"})
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def sample_pdf_bytes(sample_pdf: Path) -> bytes:
    return sample_pdf.read_bytes()


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    with pdf_path.open("wb") as stream:
        PdfWriter().write(stream)
    return pdf_path


@pytest.fixture()
def encrypted_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "locked.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    writer.add_blank_page(width=72, height=144)
    writer.encrypt(user_password="secret", owner_password="owner")
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


# -- Fake collaborators -------------------------------------------------------


class FakeSurface:
    def __init__(self, width: int, height: int, context: dict[str, Any]) -> None:
        self.width = width
        self.height = height
        self.context = context

    def encode_png(self) -> bytes:
        drawn = ",".join(str(number) for number in self.context["drawn"])
        return PNG_SIGNATURE + f"{self.width}x{self.height}:{drawn}".encode("ascii")


class FakeSurfaceProvider:
    def __init__(self) -> None:
        self.active = 0
        self.max_active = 0
        self.created = 0
        self.destroyed = 0

    def create(self, width: int, height: int) -> SurfaceAndContext:
        self.active += 1
        self.created += 1
        self.max_active = max(self.max_active, self.active)
        context: dict[str, Any] = {"drawn": []}
        return SurfaceAndContext(surface=FakeSurface(width, height, context), context=context)

    def destroy(self, target: SurfaceAndContext) -> None:
        self.active -= 1
        self.destroyed += 1


@dataclass
class FakePage(BackendPage):
    number: int
    failing: bool = False

    def get_viewport(self, scale: float) -> Viewport:
        return Viewport(width=int(100 * scale), height=int(150 * scale), scale=scale)

    def render(self, *, context: Any, viewport: Viewport, surface_provider: Any) -> None:
        if self.failing:
            raise RuntimeError("content stream is broken")
        context["drawn"].append(self.number)


@dataclass
class FakeDocument(BackendDocument):
    failing_pages: set[int] = field(default_factory=set)
    requested: list[int] = field(default_factory=list)
    closed: bool = False

    def get_page(self, number: int) -> FakePage:
        if not 1 <= number <= self.page_count:
            raise IndexError(f"page {number} out of range")
        self.requested.append(number)
        return FakePage(number=number, failing=number in self.failing_pages)

    def close(self) -> None:
        self.closed = True


class FakeEngine:
    def __init__(self, page_count: int = 3, failing_pages: set[int] | None = None) -> None:
        self.page_count = page_count
        self.failing_pages = failing_pages or set()
        self.opened: list[tuple[bytes, EngineOptions]] = []
        self.documents: list[FakeDocument] = []

    def open(self, data: bytes, options: EngineOptions) -> FakeDocument:
        self.opened.append((data, options))
        document = FakeDocument(page_count=self.page_count, failing_pages=set(self.failing_pages))
        self.documents.append(document)
        return document


@pytest.fixture()
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture()
def fake_provider() -> FakeSurfaceProvider:
    return FakeSurfaceProvider()


def png_size(content: bytes) -> tuple[int, int]:
    """Read width and height from a PNG IHDR chunk."""

    return int.from_bytes(content[16:20], "big"), int.from_bytes(content[20:24], "big")
