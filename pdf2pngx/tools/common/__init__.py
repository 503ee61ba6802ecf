"""Shared building blocks for pdf2pngx tools."""
