"""Byte streams, readers, typed buffers, value types and small utilities."""

__version__ = "0.1.0"