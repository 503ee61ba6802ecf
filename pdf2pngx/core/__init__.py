"""Core helpers shared across pdf2pngx."""
