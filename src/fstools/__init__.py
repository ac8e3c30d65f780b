"""fstools - small filesystem command line utilities."""

__version__ = "0.3.0"
