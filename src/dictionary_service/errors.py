"""Error types shared by the loader and the HTTP layer.

The lookup engine itself never raises: a missing word is reported through the
``found`` flag. ``DictionaryError`` covers the failures around it: reading a
source or snapshot at startup, and rejecting bad HTTP input.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    INVALID_SOURCE = "INVALID_SOURCE"
    INVALID_SNAPSHOT = "INVALID_SNAPSHOT"
    WORD_NOT_FOUND = "WORD_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"


class DictionaryError(Exception):
    """Failure with a stable machine-readable code."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, object]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }
