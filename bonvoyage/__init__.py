"""Screens, sprites and per-frame logic for a two-level side-scrolling runner game."""

__version__ = "0.1.0"