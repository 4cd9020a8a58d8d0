"""Stateless developer-utility converters."""

__version__ = "0.1.0"
