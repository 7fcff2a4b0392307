"""Track books, magazines, users and loans in a small library."""

__version__ = "0.1.0"
__all__ = ["__version__"]