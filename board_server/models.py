"""
Data models for the board: classes, their assignments, and extraction candidates.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date


def new_id() -> str:
    """Allocates a fresh opaque identifier."""
    return uuid.uuid4().hex


@dataclass
class Assignment:
    """A named unit of work with a due date, owned by exactly one class."""
    name: str
    due_date: date
    id: str = field(default_factory=new_id)


@dataclass
class Class:
    """An academic course owning a collection of assignments."""
    name: str
    overview: str = ""
    assignments: list[Assignment] = field(default_factory=list)
    id: str = field(default_factory=new_id)


@dataclass(frozen=True)
class ExtractedAssignment:
    """A validated assignment proposal coming out of the LLM response."""
    name: str
    due_date: date
