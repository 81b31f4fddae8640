"""
Shared Pydantic models for REST API serialization.

This module contains Pydantic equivalents of the board dataclasses, plus the
request/response bodies of the board service endpoints.
"""
from __future__ import annotations

import typing as t
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from board_server.models import Assignment as AssignmentRecord
from board_server.models import Class as ClassRecord


class Assignment(BaseModel):
    """An assignment with its due date."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    due_date: date


class Class(BaseModel):
    """A class with its assignments."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    overview: str = ""
    assignments: list[Assignment] = Field(default_factory=list)


def assignment_out(record: AssignmentRecord) -> Assignment:
    return Assignment.model_validate(record)


def class_out(record: ClassRecord) -> Class:
    return Class.model_validate(record)


# Request/Response Models for API endpoints
class CreateClassRequest(BaseModel):
    """Request model for creating a class."""
    name: str
    overview: str = ""


class AddAssignmentRequest(BaseModel):
    """Request model for adding an assignment to a class."""
    name: str
    due_date: date


class ChangeDueDateRequest(BaseModel):
    """Request model for moving an assignment to a new due date."""
    due_date: date


class SetSyllabusRequest(BaseModel):
    """Request model for replacing the board's syllabus."""
    text: str


class SyllabusResponse(BaseModel):
    """Response model carrying the board's syllabus."""
    text: str


class ExtractAssignmentsRequest(BaseModel):
    """Request model for extracting assignments from the stored syllabus."""
    atomic: bool = False


class ExtractAssignmentsResponse(BaseModel):
    """Response model listing the assignments added by an extraction."""
    added: list[Assignment]


class ShowAssignmentsResponse(BaseModel):
    """Response model for the formatted assignment listing."""
    formatted_assignments: str


class ErrorDetail(BaseModel):
    """Body of an error response."""
    message: str
    issues: list[str] = Field(default_factory=list)
    error: t.Optional[str] = None
