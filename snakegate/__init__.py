"""Terminal snake game with teleporting gates, items and staged missions."""

__version__ = "0.1.0"