"""Axis scoring and badge progression engine for interactive stories."""

__version__ = "0.1.0"
