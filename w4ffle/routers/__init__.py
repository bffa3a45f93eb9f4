"""Router modules for the puzzle API."""

from . import health, images, puzzles

__all__ = ["health", "images", "puzzles"]
