"""Namespace for pluggable pdf2pngx tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .rasterizer import rasterize  # noqa: F401  # register convert_png and info tools


__all__ = ["registry", "load_builtin_plugins"]
