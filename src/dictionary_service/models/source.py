from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SourceWord(BaseModel):
    """Single entry of the upstream JSON export."""

    model_config = ConfigDict(populate_by_name=True)

    english_word: str = Field(alias="EnglishWord")
    meanings: list[str] = Field(default_factory=list, alias="Meanings")


class SourceDictionary(BaseModel):
    """Top-level document of the upstream JSON export."""

    model_config = ConfigDict(populate_by_name=True)

    total_unique_words: int = Field(0, alias="TotalUniqueWords")  # sizing hint only
    words: list[SourceWord] = Field(default_factory=list, alias="Words")

    def to_mapping(self) -> dict[str, list[str]]:
        """Collapse to word → meanings. Later duplicates replace earlier ones."""
        return {w.english_word: w.meanings for w in self.words}
