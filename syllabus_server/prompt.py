# -*- coding: utf-8 -*-
"""
Rendering of the assignment extraction prompt.

The template lives in prompts/assignment_extraction_prompt.txt. Rendering is
pure: the same syllabus and day always give the same prompt.
"""
from __future__ import annotations

import typing as t
from datetime import date

from prompts import load_prompt

PROMPT_TEMPLATE = load_prompt("assignment_extraction_prompt")

SYLLABUS_START_MARKER = "===== Start of Syllabus ====="
SYLLABUS_END_MARKER = "===== End of Syllabus ====="


def _neutralize_markers(syllabus_text: str) -> str:
    """Drops marker strings from the syllabus so it cannot close its own block."""
    for marker in (SYLLABUS_START_MARKER, SYLLABUS_END_MARKER):
        syllabus_text = syllabus_text.replace(marker, "")
    return syllabus_text


def build_extraction_prompt(syllabus_text: str, today: t.Optional[date] = None) -> str:
    """Builds the prompt asking the LLM for the assignments in a syllabus.

    :param syllabus_text: The syllabus to extract from.
    :param today: The current day, stated in the prompt when given.
    :return: The rendered prompt.
    """
    today_line = f"\nToday's date is {today.isoformat()}.\n" if today else ""
    # Syllabus goes in last so placeholder-like text inside it is left alone.
    return (
        PROMPT_TEMPLATE
        .replace("{TODAY_LINE}", today_line)
        .replace("{SYLLABUS}", _neutralize_markers(syllabus_text.strip()))
    )
