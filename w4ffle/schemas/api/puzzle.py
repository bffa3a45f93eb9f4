from typing import Dict, List

from pydantic import BaseModel, Field


class PuzzleResponse(BaseModel):
    """Today's puzzle as served to clients."""

    date: str = Field(..., description="UTC calendar date, YYYY-MM-DD")
    rounds: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Round index -> image references in presentation order",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "date": "2026-01-16",
                "rounds": {
                    "0": [
                        "https://api.example.com/img/2026-01-16%2Fr0_2.png",
                        "https://api.example.com/img/2026-01-16%2Fr0_1.png",
                    ],
                    "1": ["https://api.example.com/img/2026-01-16%2Fr1_1.png"],
                },
            }
        }


class PuzzleNotFoundResponse(BaseModel):
    error: str
    date: str
