"""Character translation and deletion filter with ranges and character classes."""

__version__ = "0.1.0"
__all__ = ["__version__"]