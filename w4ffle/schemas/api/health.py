from typing import List

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Diagnostic view of the backing store."""

    ok: bool = True
    tables: List[str] = Field(default_factory=list, description="Table names in the store")
