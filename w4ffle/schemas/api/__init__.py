from w4ffle.schemas.api.health import HealthResponse
from w4ffle.schemas.api.puzzle import PuzzleNotFoundResponse, PuzzleResponse

__all__ = [
    "HealthResponse",
    "PuzzleResponse",
    "PuzzleNotFoundResponse",
]
