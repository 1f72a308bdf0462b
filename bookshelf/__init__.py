"""Console management of a library's book catalogue: books, reports, file loading and menus."""

__version__ = "0.1.0"
__all__ = ["__version__"]