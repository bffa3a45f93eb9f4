from typing import List, NamedTuple, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from w4ffle.models.puzzle import Puzzle, PuzzleImage


class ImageRow(NamedTuple):
    round_index: int
    image_key: str


class PuzzleRepository:
    """Read-only access to puzzles and their images."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_date(self, puzzle_date: str) -> Optional[Puzzle]:
        """Puzzle for a "YYYY-MM-DD" date id, if one was seeded."""
        stmt = select(Puzzle).where(Puzzle.puzzle_date == puzzle_date)
        return self.session.scalar(stmt)

    def get_image_rows(self, puzzle_id: int) -> List[ImageRow]:
        """Round index and key of every image of a puzzle, by round.

        ``is_real`` is never selected.
        """
        stmt = (
            select(PuzzleImage.round_index, PuzzleImage.image_key)
            .where(PuzzleImage.puzzle_id == puzzle_id)
            .order_by(PuzzleImage.round_index)
        )
        return [
            ImageRow(round_index, image_key)
            for round_index, image_key in self.session.execute(stmt)
        ]
