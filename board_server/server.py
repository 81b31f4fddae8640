# -*- coding: utf-8 -*-
import typing as t
from datetime import date

from fastmcp import FastMCP

from board_server.board import Board
from board_server.errors import ValidationError
from board_server.formatting import format_assignments
from board_server.models import Assignment, Class
from syllabus_server.llm import LLMClient, OpenAILLM

mcp = FastMCP("BrontoBoardServer")

# In-memory board shared by every tool call of this server process
board = Board()
_llm: t.Optional[LLMClient] = None


def get_llm() -> LLMClient:
    """Returns the process-wide LLM, creating the OpenAI client on first use."""
    global _llm
    if _llm is None:
        _llm = OpenAILLM()
    return _llm


def parse_day(value: str) -> date:
    """Parses an ISO 'YYYY-MM-DD' date coming in over the tool boundary.

    :param value: The date string.
    :return: The parsed date.
    """
    try:
        return date.fromisoformat(value.strip()[:10])
    except (ValueError, AttributeError):
        raise ValidationError(f"Invalid date, expected YYYY-MM-DD: {value!r}") from None


def _change_assignment_due_date(assignment_id: str, new_due_date: str) -> Assignment:
    assignment = board.get_assignment(assignment_id)
    board.change_assignment_due_date(assignment, parse_day(new_due_date))
    return assignment


def _remove_assignment(assignment_id: str) -> None:
    board.remove_assignment(board.get_assignment(assignment_id))


async def _find_assignments(class_id: str, atomic: bool = False) -> list[Assignment]:
    board.check_can_extract(class_id)
    return await board.extract_assignments(class_id, get_llm(), atomic=atomic)


@mcp.tool()
def create_class(name: str, overview: str = "") -> Class:
    """Creates a class on the board.

    :param name: Name of the class.
    :param overview: Short description of the class (optional).
    :return: The new Class.
    """
    return board.create_class(name, overview)


@mcp.tool()
def add_assignment(class_id: str, name: str, due_date: str) -> Assignment:
    """Adds an assignment to a class.

    :param class_id: Id of the class.
    :param name: Name of the assignment.
    :param due_date: Due date as YYYY-MM-DD; must not be in the past.
    :return: The new Assignment.
    """
    return board.add_assignment(class_id, name, parse_day(due_date))


@mcp.tool()
def change_assignment_due_date(assignment_id: str, new_due_date: str) -> Assignment:
    """Moves an assignment to a new due date.

    :param assignment_id: Id of the assignment.
    :param new_due_date: New due date as YYYY-MM-DD; must not be in the past.
    :return: The updated Assignment.
    """
    return _change_assignment_due_date(assignment_id, new_due_date)


@mcp.tool()
def remove_assignment(assignment_id: str) -> str:
    """Removes an assignment from whichever class holds it.

    :param assignment_id: Id of the assignment.
    :return: Confirmation message.
    """
    _remove_assignment(assignment_id)
    return f"Removed assignment {assignment_id}"


@mcp.tool()
def list_assignments(class_id: str) -> list[Assignment]:
    """Lists the assignments of a class.

    :param class_id: Id of the class.
    :return: The class's assignments.
    """
    return board.list_assignments(class_id)


@mcp.tool()
def set_syllabus(text: str) -> str:
    """Replaces the board's syllabus text.

    :param text: The syllabus; must not be blank.
    :return: Confirmation message.
    """
    board.set_syllabus(text)
    return f"Syllabus set ({len(board.get_syllabus())} characters)"


@mcp.tool()
def get_syllabus() -> str:
    """Returns the board's syllabus text, or an empty string if none was set."""
    return board.get_syllabus()


@mcp.tool()
async def find_assignments(class_id: str, atomic: bool = False) -> list[Assignment]:
    """Uses an LLM to find the assignments in the board's syllabus and adds them to a class.

    The whole batch is rejected if any extracted assignment is invalid.

    :param class_id: Id of the class receiving the assignments.
    :param atomic: Add nothing if any name is already taken.
    :return: The assignments added.
    """
    return await _find_assignments(class_id, atomic)


@mcp.tool()
def show_assignments(class_id: str) -> str:
    """Displays the assignments of a class as a formatted table.

    :param class_id: Id of the class.
    :return: Formatted table, or a message if the class has no assignments.
    """
    return format_assignments(board.list_assignments(class_id))


if __name__ == "__main__":
    mcp.run()
