from fastapi import APIRouter

from w4ffle.dependencies import ImageRefDep, PuzzleServiceDep, TodayDep
from w4ffle.schemas.api.puzzle import PuzzleNotFoundResponse, PuzzleResponse

router = APIRouter(prefix="/puzzle", tags=["puzzle"])


@router.get(
    "/today",
    response_model=PuzzleResponse,
    responses={404: {"model": PuzzleNotFoundResponse}},
    summary="Get today's puzzle",
)
def get_today_puzzle(
    today: TodayDep,
    service: PuzzleServiceDep,
    image_ref: ImageRefDep,
):
    """Rounds of today's (UTC) puzzle, image order shuffled per request."""
    return service.get_puzzle(today, image_ref)
