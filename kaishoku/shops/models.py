from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

MAX_COUNT = 100


class SearchCriteria(BaseModel):
    keyword: str = Field(..., min_length=1, description="Area or free-text keyword")
    budget: str = Field(default="", description='Hot Pepper budget code, e.g. "B005"')
    smoking: str = Field(default="", description='"1" non-smoking only, "0" smoking allowed')
    count: int = Field(default=10, ge=1, le=MAX_COUNT)
    start: int = Field(default=1, ge=1, description="1-indexed offset of the first result")

    @field_validator("keyword")
    @classmethod
    def _keyword_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Keyword is required.")
        return value


class Annotation(BaseModel):
    """Outcome of one generation attempt for one shop."""

    ok: bool
    text: str


class ShopsResponse(BaseModel):
    # Shop records pass through untouched apart from the added ``aiAnalysis``.
    shops: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    error: str
