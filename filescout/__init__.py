"""Search files and ZIP archives for a string, print their contents, and serve a small web front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]