"""Plugin adapters exposing the rasterizer through the tool registry."""

from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .converter import PdfToPngConverter
from .types import ConversionOptions, PageOutputRecord, SourceInput
from .validators import get_pdf_info

LOGGER = get_logger("pdf2pngx.tools.png")


def _resolve_source(context: Any) -> SourceInput:
    source = context.config.get("source")
    if source is None:
        source = context.input_path
    if source is None:
        raise ValueError("Conversion requires either an input path or a source buffer")
    return source


@register_tool("convert_png")
class PdfToPngTool(BaseTool):
    name = "convert_png"

    def run(self) -> list[PageOutputRecord]:
        context = self.context
        source = _resolve_source(context)
        options = self._ensure_options(context.config.get("options"))
        if context.output_path is not None:
            options = dataclasses.replace(options, output_dir=context.output_path)

        LOGGER.debug("Converting %s to PNG pages with %r", context.input_path or "<buffer>", options)
        converter = PdfToPngConverter(
            options,
            engine=context.resources.get("engine"),
            surface_provider=context.resources.get("surface_provider"),
        )
        result = asyncio.run(converter.convert(source))
        context.resources["result"] = result
        return result

    @staticmethod
    def _ensure_options(value: Any) -> ConversionOptions:
        if value is None:
            return ConversionOptions()
        if isinstance(value, ConversionOptions):
            return value
        if isinstance(value, dict):
            return ConversionOptions(**value)
        raise TypeError("options must be a ConversionOptions instance or mapping")


@register_tool("info")
class PdfInfoTool(BaseTool):
    name = "info"

    def run(self) -> dict[str, Any]:
        context = self.context
        source = _resolve_source(context)
        info = get_pdf_info(source, password=context.config.get("password"))
        context.resources["result"] = info
        return info
