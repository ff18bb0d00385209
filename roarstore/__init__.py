"""Array, bitmap and wrapping store containers for sets of 16-bit integers."""

__version__ = "0.1.0"
__all__ = ["array_store", "bitmap_store", "errors", "setops", "store", "util"]