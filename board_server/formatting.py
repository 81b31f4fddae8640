# -*- coding: utf-8 -*-
"""Plain-text rendering of assignment lists, shared by the MCP tools and the REST service."""
from datetime import date

from board_server.models import Assignment


def _format_date(day: date) -> str:
    """Formats a due date as 'Mon 1/15/2026'."""
    return f"{day.strftime('%a')} {day.month}/{day.day}/{day.year}"


def format_assignments(assignments: list[Assignment]) -> str:
    """Formats assignments as a clean table, earliest due date first.

    :param assignments: The assignments to show.
    :return: Formatted table string, or 'No assignments.' for an empty list.
    """
    if not assignments:
        return "No assignments."

    lines = []
    lines.append("📘 ASSIGNMENTS")
    lines.append("=" * 70)
    lines.append(f"{'#':<4} {'Name':<45} {'Due':<20}")
    lines.append("-" * 70)

    for idx, assignment in enumerate(sorted(assignments, key=lambda a: a.due_date), 1):
        name = assignment.name[:44] if len(assignment.name) > 44 else assignment.name
        lines.append(f"{idx:<4} {name:<45} {_format_date(assignment.due_date):<20}")

    lines.append("=" * 70)
    lines.append(f"Total: {len(assignments)} assignment(s)")
    return "\n".join(lines)
