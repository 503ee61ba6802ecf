"""Command line interface for pdf2pngx."""
