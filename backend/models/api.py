"""Request and response schemas for the WordMeter HTTP API."""
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalysisRequest(BaseModel):
    """Body of POST /api/words and POST /api/words/csv."""
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(..., description="Page to fetch and analyze")
    top_n: int = Field(..., alias="topN", description="Number of words to return")

    @field_validator("top_n", mode="before")
    @classmethod
    def top_n_must_be_number(cls, value: Any) -> Any:
        # Lax int parsing would otherwise accept true and "2"
        if isinstance(value, (bool, str)):
            raise ValueError("topN must be a number")
        return value


class WordCountItem(BaseModel):
    word: str
    count: int


class WordsResponse(BaseModel):
    """Successful analysis response."""
    words: List[WordCountItem]


class ErrorResponse(BaseModel):
    """Failure response; returned with a non-2xx status."""
    error: str
