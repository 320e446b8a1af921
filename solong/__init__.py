"""Game rules, maps and XPM tile images for a tile puzzle game."""

__version__ = "0.1.0"