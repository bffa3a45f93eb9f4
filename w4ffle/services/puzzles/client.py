import logging
import random
from datetime import date
from typing import Callable, Dict, List, Optional
from urllib.parse import quote

from w4ffle.exceptions import PuzzleNotFound
from w4ffle.repositories.puzzle import PuzzleRepository
from w4ffle.schemas.api.puzzle import PuzzleResponse

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides the RFC 3986 unreserved set
_URI_COMPONENT_SAFE = "!*'()"


def image_proxy_url(base_url: str, key: str) -> str:
    """Absolute URL of the image proxy route for a storage key.

    The key is encoded as a single path segment, so ``/`` becomes ``%2F``.
    """
    return f"{base_url.rstrip('/')}/img/{quote(key, safe=_URI_COMPONENT_SAFE)}"


class PuzzleService:
    """Resolves a date into a puzzle of shuffled rounds."""

    def __init__(self, repo: PuzzleRepository, rng: Optional[random.Random] = None):
        self.repo = repo
        self.rng = rng or random.Random()

    def get_puzzle(self, date_id: str, image_ref: Callable[[str], str]) -> PuzzleResponse:
        """Assemble the puzzle seeded for ``date_id``.

        :param date_id: calendar date as ``YYYY-MM-DD``
        :param image_ref: maps a storage key to the reference handed to clients
        :raises PuzzleNotFound: no puzzle exists for that date
        """
        try:
            puzzle_date = date.fromisoformat(date_id)
        except ValueError:
            raise PuzzleNotFound(date_id) from None

        puzzle = self.repo.get_by_date(puzzle_date.isoformat())
        if puzzle is None:
            raise PuzzleNotFound(date_id)

        grouped: Dict[int, List[str]] = {}
        for row in self.repo.get_image_rows(puzzle.id):
            grouped.setdefault(row.round_index, []).append(row.image_key)

        rounds: Dict[str, List[str]] = {}
        for round_index in sorted(grouped):
            keys = grouped[round_index]
            self.rng.shuffle(keys)
            rounds[str(round_index)] = [image_ref(key) for key in keys]

        logger.info(
            f"Resolved puzzle {puzzle.id} for {date_id}",
            extra={"puzzle_id": puzzle.id, "round_count": len(rounds)},
        )
        return PuzzleResponse(date=date_id, rounds=rounds)
