from __future__ import annotations

from dictionary_service.models.api import HealthOutput, LookupOutput, StatsOutput, SuggestOutput
from dictionary_service.models.source import SourceDictionary, SourceWord

__all__ = [
    # source
    "SourceDictionary",
    "SourceWord",
    # api
    "HealthOutput",
    "LookupOutput",
    "SuggestOutput",
    "StatsOutput",
]
