from fastapi import APIRouter

from w4ffle.dependencies import DatabaseDep
from w4ffle.schemas.api.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(database: DatabaseDep):
    """List the tables of the backing store (diagnostic only)."""
    return HealthResponse(ok=True, tables=database.list_tables())
