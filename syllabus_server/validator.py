# -*- coding: utf-8 -*-
"""
Parsing and validation of the LLM reply to the extraction prompt.

The reply is untrusted text. It is decoded as JSON only, never evaluated, and
every candidate goes through the same checks. A single bad candidate rejects
the whole batch.
"""
from __future__ import annotations

import json
import typing as t
from datetime import date

from board_server.errors import MalformedResponseError, ValidationError
from board_server.models import ExtractedAssignment
from board_server.store import as_day

_decoder = json.JSONDecoder()


def extract_json_object(raw_text: str) -> dict[str, t.Any]:
    """Returns the first brace-delimited substring that decodes as a JSON object.

    :param raw_text: The raw LLM reply, possibly wrapped in prose or code fences.
    :raises MalformedResponseError: If no such object exists.
    """
    start = raw_text.find("{")
    while start != -1:
        try:
            obj, _ = _decoder.raw_decode(raw_text, start)
        except json.JSONDecodeError:
            start = raw_text.find("{", start + 1)
            continue
        return obj
    raise MalformedResponseError("No JSON object found in LLM response.")


def _coerce_int(value: t.Any) -> t.Optional[int]:
    """Integers, integral floats and strings holding them; anything else is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def _check_candidate(raw: t.Any, reference: date) -> t.Union[ExtractedAssignment, str]:
    """Validates one candidate; returns either the assignment or the issue found."""
    if not isinstance(raw, dict):
        return "Encountered an assignment entry that is not an object."

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        return "Assignment is missing a valid name."
    name = name.strip()

    month = _coerce_int(raw.get("monthDue"))
    day = _coerce_int(raw.get("dayDue"))
    if month is None or day is None:
        return f'Assignment "{name}" has invalid numeric fields.'

    # The model never supplies a year.
    try:
        due_date = date(reference.year, month, day)
    except (ValueError, OverflowError):
        return f'Assignment "{name}" produced an invalid date.'

    if due_date < reference:
        return f'Assignment "{name}" has a past due date.'

    return ExtractedAssignment(name=name, due_date=due_date)


def collect_candidates(
        raw_text: str,
        reference: date,
) -> tuple[list[ExtractedAssignment], list[str]]:
    """Parses the reply and checks every candidate without applying the gate.

    :param raw_text: The raw LLM reply.
    :param reference: The day due dates are checked against; its year is used for every date.
    :return: The candidates that passed, and one issue per candidate that did not.
    :raises MalformedResponseError: If the reply has no object with an ``assignments`` list.
    """
    response = extract_json_object(raw_text)
    raw_assignments = response.get("assignments")
    if not isinstance(raw_assignments, list):
        raise MalformedResponseError("LLM response has no 'assignments' list.")

    reference = as_day(reference)
    validated: list[ExtractedAssignment] = []
    issues: list[str] = []
    for raw in raw_assignments:
        result = _check_candidate(raw, reference)
        if isinstance(result, str):
            issues.append(result)
        else:
            validated.append(result)
    return validated, issues


def parse_and_validate(raw_text: str, reference: date) -> list[ExtractedAssignment]:
    """Parses the reply and returns its assignments only if every one of them is valid.

    :raises MalformedResponseError: If the reply is not structurally usable.
    :raises ValidationError: If any candidate failed; ``issues`` lists them all.
    """
    validated, issues = collect_candidates(raw_text, reference)
    if issues:
        raise ValidationError("LLM provided disallowed assignments:", issues)
    return validated
