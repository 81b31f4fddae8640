"""
Error taxonomy for the board and the assignment extraction pipeline.

Every error raised by the board derives from BoardError so service layers
can translate the whole family in one place.
"""
from __future__ import annotations

import typing as t


class BoardError(Exception):
    """Base class for all board errors."""


class ValidationError(BoardError):
    """Bad input to a store operation, or a batch rejected by the validation gate.

    :param message: Human-readable summary.
    :param issues: Individual problems found, one entry per rejected candidate.
    """

    def __init__(self, message: str, issues: t.Iterable[str] = ()) -> None:
        self.issues: list[str] = list(issues)
        if self.issues:
            message = f"{message}\n- " + "\n- ".join(self.issues)
        super().__init__(message)


class NotFoundError(BoardError):
    """Unknown class or assignment id."""


class MalformedResponseError(BoardError):
    """LLM output could not be read as the expected JSON structure."""


class DuplicateAssignmentError(BoardError):
    """An assignment with the same name already exists in the class."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate assignment: {name}")


class LLMError(BoardError):
    """Transport, authentication or quota failure while calling the LLM."""
