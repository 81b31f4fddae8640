"""Extraction of assignments from syllabus text into a class.

Builds the prompt, asks the LLM, validates the reply and only then writes to
the store. Errors from any step propagate unchanged to the caller.
"""
import logging
import typing as t
from datetime import date

from board_server.errors import DuplicateAssignmentError, ValidationError
from board_server.models import Assignment, ExtractedAssignment
from board_server.store import AssignmentStore, as_day
from syllabus_server.llm import LLMClient
from syllabus_server.prompt import build_extraction_prompt
from syllabus_server.validator import parse_and_validate

logger = logging.getLogger(__name__)


def _check_batch_names(
    store: AssignmentStore,
    class_id: str,
    candidates: list[ExtractedAssignment],
) -> None:
    """Raises DuplicateAssignmentError for the first name already taken in the class or the batch."""
    seen: set[str] = set()
    for candidate in candidates:
        if candidate.name in seen or store.has_assignment_named(class_id, candidate.name):
            raise DuplicateAssignmentError(candidate.name)
        seen.add(candidate.name)


def _check_still_due(store: AssignmentStore, candidates: list[ExtractedAssignment]) -> None:
    """Raises ValidationError if any candidate is now before the store's today."""
    today = store.today()
    issues = [
        f'Assignment "{c.name}" has a past due date.'
        for c in candidates
        if c.due_date < today
    ]
    if issues:
        raise ValidationError("Extracted assignments are no longer due:", issues)


async def extract_and_commit(
    store: AssignmentStore,
    class_id: str,
    syllabus_text: str,
    llm: LLMClient,
    reference: t.Optional[date] = None,
    atomic: bool = False,
) -> list[Assignment]:
    """Extract assignments from a syllabus with an LLM and add them to a class.

    Args:
        store: The store owning the class
        class_id: Id of the class receiving the assignments
        syllabus_text: The syllabus to read
        llm: Anything with an async complete(prompt) method
        reference: Day due dates are checked against (default: the store's today)
        atomic: Check every name for duplicates before the first write

    Returns:
        The assignments added to the class

    Raises:
        NotFoundError: If the class does not exist (checked before calling the LLM)
        LLMError: If the LLM call fails
        MalformedResponseError: If the reply is not the expected JSON shape
        ValidationError: If any extracted candidate is invalid, is no longer due by the
            store's today once the LLM replies, or ``reference`` is before that today;
            nothing is added
        DuplicateAssignmentError: If a name is already taken. Without ``atomic``,
            assignments added before the duplicate stay in the class.
    """
    target = store.get_class(class_id)
    today = store.today()
    reference = as_day(reference) if reference else today
    if reference < today:
        raise ValidationError(
            f"Reference day {reference.isoformat()} is before today ({today.isoformat()})."
        )

    prompt = build_extraction_prompt(syllabus_text, today=reference)
    logger.info("Requesting assignments for %s from the LLM", target.name)
    raw_response = await llm.complete(prompt)
    logger.debug("Raw LLM response:\n%s", raw_response)

    try:
        candidates = parse_and_validate(raw_response, reference)
    except ValidationError as e:
        logger.warning("Rejected extracted assignments for %s: %s", target.name, e)
        raise

    # The day may have rolled over while waiting on the LLM.
    _check_still_due(store, candidates)

    if atomic:
        _check_batch_names(store, class_id, candidates)

    added: list[Assignment] = []
    for candidate in candidates:
        if store.has_assignment_named(class_id, candidate.name):
            raise DuplicateAssignmentError(candidate.name)
        assignment = store.add_assignment(class_id, candidate.name, candidate.due_date)
        added.append(assignment)
        logger.info(
            'Added "%s" to %s (due %s)',
            assignment.name, target.name, assignment.due_date.isoformat(),
        )
    return added
