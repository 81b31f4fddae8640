"""
FastAPI service for board operations.

This service exposes the board (classes, assignments, syllabus) and the
LLM-backed assignment extraction as REST API endpoints. Everything except
extraction is a fast in-memory operation; extraction waits on the LLM.
"""
from __future__ import annotations

import logging
import os
import typing as t
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException

from board_server.board import Board
from board_server.errors import (
    BoardError,
    DuplicateAssignmentError,
    LLMError,
    MalformedResponseError,
    NotFoundError,
    ValidationError,
)
from board_server.formatting import format_assignments
from services.shared.models import (
    AddAssignmentRequest,
    Assignment,
    ChangeDueDateRequest,
    Class,
    CreateClassRequest,
    ErrorDetail,
    ExtractAssignmentsRequest,
    ExtractAssignmentsResponse,
    SetSyllabusRequest,
    ShowAssignmentsResponse,
    SyllabusResponse,
    assignment_out,
    class_out,
)
from syllabus_server.llm import LLMClient, OpenAILLM

logger = logging.getLogger(__name__)

# In-memory board; in a distributed system this would be backed by a database
board = Board()

# LLM client - created lazily so the service starts without an API key
_llm: t.Optional[LLMClient] = None

_STATUS_CODES: dict[type[BoardError], int] = {
    ValidationError: 422,
    NotFoundError: 404,
    DuplicateAssignmentError: 409,
    MalformedResponseError: 502,
    LLMError: 502,
}


def get_board() -> Board:
    return board


def get_llm() -> LLMClient:
    global _llm
    if _llm is None:
        _llm = OpenAILLM()
    return _llm


def get_llm_provider() -> t.Callable[[], LLMClient]:
    """Hands out get_llm uncalled so the client is only built once the request is known to need it."""
    return get_llm


def _http_error(error: BoardError) -> HTTPException:
    """Translates a board error into the matching HTTP error."""
    status_code = _STATUS_CODES.get(type(error), 500)
    if status_code >= 500:
        logger.error("Board operation failed: %s", error)
    detail = ErrorDetail(
        message=str(error),
        issues=getattr(error, "issues", []),
        error=type(error).__name__,
    )
    return HTTPException(status_code=status_code, detail=detail.model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup and cleanup on shutdown."""
    if not os.getenv("OPENAI_API_KEY"):
        logger.warning("OPENAI_API_KEY is not set; assignment extraction will fail.")
    yield


app = FastAPI(
    title="Board Service",
    description="REST API for classes, assignments and LLM-backed syllabus extraction",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "service": "board-service"}


@app.post("/classes", response_model=Class, status_code=201)
async def create_class(request: CreateClassRequest, board: Board = Depends(get_board)) -> Class:
    """Create a class."""
    try:
        return class_out(board.create_class(request.name, request.overview))
    except BoardError as e:
        raise _http_error(e) from e


@app.get("/classes/{class_id}/assignments", response_model=list[Assignment])
async def list_assignments(class_id: str, board: Board = Depends(get_board)) -> list[Assignment]:
    """List the assignments of a class."""
    try:
        return [assignment_out(a) for a in board.list_assignments(class_id)]
    except BoardError as e:
        raise _http_error(e) from e


@app.post("/classes/{class_id}/assignments", response_model=Assignment, status_code=201)
async def add_assignment(
    class_id: str,
    request: AddAssignmentRequest,
    board: Board = Depends(get_board),
) -> Assignment:
    """Add an assignment to a class. The due date must not be in the past."""
    try:
        return assignment_out(board.add_assignment(class_id, request.name, request.due_date))
    except BoardError as e:
        raise _http_error(e) from e


@app.patch("/assignments/{assignment_id}", response_model=Assignment)
async def change_assignment_due_date(
    assignment_id: str,
    request: ChangeDueDateRequest,
    board: Board = Depends(get_board),
) -> Assignment:
    """Move an assignment to a new due date."""
    try:
        assignment = board.get_assignment(assignment_id)
        board.change_assignment_due_date(assignment, request.due_date)
        return assignment_out(assignment)
    except BoardError as e:
        raise _http_error(e) from e


@app.delete("/assignments/{assignment_id}", status_code=204)
async def remove_assignment(assignment_id: str, board: Board = Depends(get_board)) -> None:
    """Remove an assignment from whichever class holds it."""
    try:
        board.remove_assignment(board.get_assignment(assignment_id))
    except BoardError as e:
        raise _http_error(e) from e


@app.put("/syllabus", response_model=SyllabusResponse)
async def set_syllabus(request: SetSyllabusRequest, board: Board = Depends(get_board)) -> SyllabusResponse:
    """Replace the board's syllabus text."""
    try:
        board.set_syllabus(request.text)
        return SyllabusResponse(text=board.get_syllabus())
    except BoardError as e:
        raise _http_error(e) from e


@app.get("/syllabus", response_model=SyllabusResponse)
async def get_syllabus(board: Board = Depends(get_board)) -> SyllabusResponse:
    """Return the board's syllabus text (empty if never set)."""
    return SyllabusResponse(text=board.get_syllabus())


@app.post("/classes/{class_id}/assignments:extract", response_model=ExtractAssignmentsResponse)
async def extract_assignments(
    class_id: str,
    request: t.Optional[ExtractAssignmentsRequest] = None,
    board: Board = Depends(get_board),
    llm_provider: t.Callable[[], LLMClient] = Depends(get_llm_provider),
) -> ExtractAssignmentsResponse:
    """
    Extract assignments from the stored syllabus into a class.

    This endpoint waits on the LLM. The whole batch is rejected if any
    extracted assignment is invalid.
    """
    atomic = request.atomic if request else False
    try:
        board.check_can_extract(class_id)
        added = await board.extract_assignments(class_id, llm_provider(), atomic=atomic)
        return ExtractAssignmentsResponse(added=[assignment_out(a) for a in added])
    except BoardError as e:
        raise _http_error(e) from e


@app.get("/classes/{class_id}/assignments:show", response_model=ShowAssignmentsResponse)
async def show_assignments(class_id: str, board: Board = Depends(get_board)) -> ShowAssignmentsResponse:
    """Show the assignments of a class as a formatted table."""
    try:
        return ShowAssignmentsResponse(formatted_assignments=format_assignments(board.list_assignments(class_id)))
    except BoardError as e:
        raise _http_error(e) from e


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("BOARD_SERVICE_PORT", "8004")))
