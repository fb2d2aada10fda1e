"""Platformer game logic (timers, text layout, tiles, world map) and resource-embedding tools."""

__version__ = "0.1.0"