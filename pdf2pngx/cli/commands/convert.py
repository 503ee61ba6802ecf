"""CLI helpers for the PDF → PNG conversion command."""

from __future__ import annotations

from argparse import ArgumentParser, ArgumentTypeError, _SubParsersAction

from ...tools.common.interfaces import ConversionContext
from ...tools.rasterizer.utils import parse_page_numbers


def _positive_float(value: str) -> float:
    try:
        scale = float(value)
    except ValueError as exc:
        raise ArgumentTypeError(f"invalid scale: {value!r}") from exc
    if not scale > 0:
        raise ArgumentTypeError(f"scale must be greater than 0, got {value!r}")
    return scale


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("convert", help="Render PDF pages to PNG images")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("-o", "--output-dir", default=None, help="Directory receiving the PNG files")
    parser.add_argument(
        "--pages",
        nargs="+",
        default=None,
        help="Page numbers to render, in order (default: all pages)",
    )
    parser.add_argument("--scale", type=_positive_float, default=1.0, help="Viewport scale factor")
    parser.add_argument("--password", default=None, help="Password for encrypted PDFs")
    parser.add_argument("--mask", default=None, help="File name stem used when the input has none")
    parser.add_argument("--use-system-fonts", action="store_true", help="Resolve fonts from the host system")
    parser.add_argument(
        "--enable-font-face",
        action="store_true",
        help="Allow the engine to load embedded font faces",
    )
    parser.set_defaults(tool_name="convert_png", build_context=_build_context)


def _build_context(args) -> ConversionContext:
    pages = parse_page_numbers(args.pages) if args.pages is not None else None
    return ConversionContext(
        input_path=args.input,
        output_path=args.output_dir,
        config={
            "options": {
                "viewport_scale": args.scale,
                "password": args.password,
                "output_file_mask": args.mask,
                "use_system_fonts": args.use_system_fonts,
                "disable_font_face": not args.enable_font_face,
                "pages": pages,
            }
        },
    )
