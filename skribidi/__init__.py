"""Text and icon building blocks: Unicode helpers, a pico SVG icon reader and font matching."""

__version__ = "0.1.0"