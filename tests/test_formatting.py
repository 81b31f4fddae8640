# -*- coding: utf-8 -*-
"""Tests for the plain-text assignment table."""
import inspect
from datetime import date

from board_server.formatting import format_assignments
from board_server.models import Assignment
from services.board_service import app as board_service_app


def test_format_assignments_empty() -> None:
    assert format_assignments([]) == "No assignments."


def test_format_assignments_sorted_by_due_date() -> None:
    text = format_assignments([
        Assignment(name="Pset#1", due_date=date(2025, 10, 5)),
        Assignment(name="Pset#0", due_date=date(2025, 9, 4)),
    ])

    assert text.index("Pset#0") < text.index("Pset#1")
    assert "Thu 9/4/2025" in text
    assert "Total: 2 assignment(s)" in text


def test_format_assignments_truncates_long_names() -> None:
    text = format_assignments([Assignment(name="x" * 60, due_date=date(2025, 9, 4))])

    assert "x" * 44 in text
    assert "x" * 45 not in text


def test_rest_service_does_not_load_the_mcp_server() -> None:
    # Importing the MCP server module would build a second board and a FastMCP instance.
    assert "board_server.server" not in inspect.getsource(board_service_app)
    assert not hasattr(board_service_app, "mcp")
