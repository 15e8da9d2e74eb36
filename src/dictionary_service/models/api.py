from __future__ import annotations

from pydantic import BaseModel


class HealthOutput(BaseModel):
    status: str = "healthy"


class LookupOutput(BaseModel):
    word: str
    meanings: list[str]


class SuggestOutput(BaseModel):
    prefix: str
    suggestions: list[str]
    count: int


class StatsOutput(BaseModel):
    total_words: int
    built_at: str | None = None
