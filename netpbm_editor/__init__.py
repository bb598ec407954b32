"""Command-driven editor for PGM and PPM images: reading, writing, selecting,
cropping, rotating, filtering, histograms and equalization."""

__version__ = "0.1.0"
__all__ = ["editor", "filters", "histogram", "image", "netpbm", "region", "rotate"]