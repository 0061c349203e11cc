"""Tile-grid raycasting and player movement, with small text and list helpers."""

__version__ = "0.1.0"