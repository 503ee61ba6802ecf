"""Command line interface for the pdf2pngx toolkit."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from ..tools import load_builtin_plugins
from ..tools.common.interfaces import ConversionContext
from ..tools.common.pipeline import registry
from ..tools.rasterizer.exceptions import Pdf2PngError
from ..tools.rasterizer.types import PageOutputRecord
from .commands import convert, info

COMMAND_MODULES = [convert, info]


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdf2pngx", description="Render PDF pages to PNG images")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> object:
    load_builtin_plugins()
    parser = _create_parser()
    args = parser.parse_args(argv)
    context: ConversionContext = args.build_context(args)
    tool = registry.create(args.tool_name, context)
    result = tool.run()
    return result


def _format_result(result: object) -> list[str]:
    if isinstance(result, list):
        lines = []
        for record in result:
            if isinstance(record, PageOutputRecord):
                lines.append(record.path or f"{record.name} ({len(record.content)} bytes)")
        return lines
    if isinstance(result, dict):
        return [f"{key}: {value}" for key, value in result.items()]
    return [str(result)]


def run(argv: Sequence[str] | None = None) -> int:
    """Console entry point printing the tool result."""

    try:
        result = main(argv)
    except Pdf2PngError as exc:
        print(f"pdf2pngx: error: {exc}", file=sys.stderr)
        return 1
    for line in _format_result(result):
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(run())
