"""Wireframe viewer for .fdf height maps, with an XPM pixmap reader."""

__version__ = "0.1.0"