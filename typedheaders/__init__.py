"""Typed parsing and formatting of common HTTP header values."""

__version__ = "0.1.0"

__all__ = ["base", "text", "pragma", "vary", "upgrade", "prefer", "hsts", "range"]