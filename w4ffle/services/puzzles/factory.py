from sqlalchemy.orm import Session

from w4ffle.repositories.puzzle import PuzzleRepository
from w4ffle.services.puzzles.client import PuzzleService


def make_puzzle_service(session: Session) -> PuzzleService:
    """Build a puzzle service bound to a request-scoped session."""
    return PuzzleService(repo=PuzzleRepository(session))
