from w4ffle.models.puzzle import Puzzle, PuzzleImage

__all__ = ["Puzzle", "PuzzleImage"]
