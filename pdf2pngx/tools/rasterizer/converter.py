"""PDF → PNG conversion orchestrator.

The converter validates the request, opens the document through a
:class:`~.backends.base.DocumentEngine`, resolves the target page sequence
and renders one page at a time into a surface obtained from a
:class:`~.backends.base.SurfaceProvider`. Blocking engine work runs in a
worker thread so :meth:`PdfToPngConverter.convert` can be awaited from an
event loop.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List

from ...core.utils import get_logger, time_block
from .backends import PixmapSurfaceProvider, PymupdfEngine
from .backends.base import BackendDocument, DocumentEngine, SurfaceProvider
from .exceptions import DocumentOpenError, NotFoundError, Pdf2PngError, PersistError, RenderError
from .types import ConversionOptions, EngineOptions, PageOutputRecord, SourceInput
from .utils import (
    build_output_filename,
    derive_file_stem,
    is_buffer_source,
    resolve_target_pages,
    validate_requested_pages,
)
from .validators import ensure_output_directory, ensure_source_exists

LOGGER = get_logger("pdf2pngx.tools.rasterizer")

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def write_png(destination: Path, content: bytes) -> None:
    """Write ``content`` to ``destination``, raising :class:`PersistError` on failure."""

    try:
        with destination.open("wb") as handle:
            handle.write(content)
    except OSError as exc:
        raise PersistError(f"Unable to write PNG file: {destination}. Error: {exc}") from exc


class PdfToPngConverter:
    """Render PDF pages to PNG images."""

    def __init__(
        self,
        options: ConversionOptions | None = None,
        *,
        engine: DocumentEngine | None = None,
        surface_provider: SurfaceProvider | None = None,
    ) -> None:
        self.options = options or ConversionOptions()
        self.engine = engine or PymupdfEngine()
        self.surface_provider = surface_provider or PixmapSurfaceProvider()

    async def convert(self, source: SourceInput) -> List[PageOutputRecord]:
        """Convert ``source`` and return one record per rendered page.

        Raises:
            NotFoundError: ``source`` is a path that does not exist.
            InvalidPageRangeError: A requested page number is below 1.
            DocumentOpenError: The engine cannot open or decrypt the PDF.
            RenderError: A page fails to render or encode.
            PersistError: Output cannot be written to the output directory.
        """

        options = self.options
        source_path = None if is_buffer_source(source) else ensure_source_exists(source)
        validate_requested_pages(options.pages)

        output_dir = None
        if options.output_dir is not None:
            output_dir = ensure_output_directory(options.output_dir)

        data = self._read_source(source, source_path)
        label = str(source_path) if source_path is not None else "<buffer>"

        with time_block(LOGGER, f"PDF to PNG conversion of {label}"):
            document = await self._open_document(data, EngineOptions.from_conversion_options(options))
            try:
                return await self._render_pages(document, source_path, output_dir)
            finally:
                document.close()

    async def _open_document(self, data: bytes, engine_options: EngineOptions) -> BackendDocument:
        try:
            return await asyncio.to_thread(self.engine.open, data, engine_options)
        except Pdf2PngError:
            raise
        except Exception as exc:
            raise DocumentOpenError(f"Unable to open PDF document. Error: {exc}") from exc

    async def _render_pages(
        self,
        document: BackendDocument,
        source_path: Path | None,
        output_dir: Path | None,
    ) -> List[PageOutputRecord]:
        total_pages = document.page_count
        targets = resolve_target_pages(total_pages, self.options.pages)
        stem = derive_file_stem(source_path, self.options.output_file_mask)

        records: List[PageOutputRecord] = []
        for page_number in targets:
            if page_number > total_pages:
                # Requests beyond the document length are skipped, not rejected.
                LOGGER.debug("Skipping page %s beyond document length %s", page_number, total_pages)
                continue
            records.append(await self._render_page(document, page_number, stem, output_dir))
        return records

    async def _render_page(
        self,
        document: BackendDocument,
        page_number: int,
        stem: str,
        output_dir: Path | None,
    ) -> PageOutputRecord:
        try:
            page = await asyncio.to_thread(document.get_page, page_number)
            viewport = page.get_viewport(self.options.viewport_scale)
            target = self.surface_provider.create(viewport.width, viewport.height)
        except Pdf2PngError:
            raise
        except Exception as exc:
            raise RenderError(page_number, str(exc)) from exc

        try:
            await asyncio.to_thread(
                page.render,
                context=target.context,
                viewport=viewport,
                surface_provider=self.surface_provider,
            )
            content = await asyncio.to_thread(target.surface.encode_png)
        except Pdf2PngError:
            raise
        except Exception as exc:
            raise RenderError(page_number, str(exc)) from exc
        finally:
            self.surface_provider.destroy(target)

        if not content.startswith(PNG_SIGNATURE):
            raise RenderError(page_number, "surface did not produce PNG data")

        name = build_output_filename(stem, page_number)
        path = ""
        if output_dir is not None:
            destination = output_dir / name
            LOGGER.debug("Writing page %s to %s", page_number, destination)
            write_png(destination, content)
            path = str(destination)

        return PageOutputRecord(
            name=name,
            content=content,
            path=path,
            page_number=page_number,
            width=viewport.width,
            height=viewport.height,
        )

    @staticmethod
    def _read_source(source: SourceInput, source_path: Path | None) -> bytes:
        if source_path is None:
            return bytes(source)  # type: ignore[arg-type]
        try:
            return source_path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(source_path) from exc
        except OSError as exc:
            raise DocumentOpenError(f"Unable to read PDF file: {source_path}. Error: {exc}") from exc


async def convert(
    source: SourceInput,
    options: ConversionOptions | None = None,
    *,
    engine: DocumentEngine | None = None,
    surface_provider: SurfaceProvider | None = None,
) -> List[PageOutputRecord]:
    """Convenience wrapper around :class:`PdfToPngConverter`."""

    converter = PdfToPngConverter(options, engine=engine, surface_provider=surface_provider)
    return await converter.convert(source)


__all__ = ["PdfToPngConverter", "convert", "write_png"]
