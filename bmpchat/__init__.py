"""BMP colour analysis, a TCP echo chat, and an SVG palette pie-chart server."""

__version__ = "0.1.0"