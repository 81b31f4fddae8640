# -*- coding: utf-8 -*-
"""
In-memory ownership of classes and their assignment collections.

Nothing here is persisted and nothing is locked: callers serialise access
to one store themselves.
"""
from __future__ import annotations

import logging
import typing as t
from datetime import date, datetime

from .errors import NotFoundError, ValidationError
from .models import Assignment, Class

logger = logging.getLogger(__name__)


def as_day(value: date) -> date:
    """Truncates a datetime to its calendar day; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


class AssignmentStore:
    """Classes keyed by id, plus a side index from assignment id to owning class id."""

    def __init__(self, clock: t.Callable[[], date] = date.today) -> None:
        self._clock = clock
        self._classes: dict[str, Class] = {}
        self._owners: dict[str, str] = {}

    def today(self) -> date:
        """The day every due date is compared against."""
        return as_day(self._clock())

    def create_class(self, name: str, overview: str = "") -> Class:
        """Creates and registers a class.

        :param name: Name of the class; must not be blank.
        :param overview: Free-form description (optional).
        :return: The new Class.
        """
        if not name or not name.strip():
            raise ValidationError("Class name cannot be empty.")
        new_class = Class(name=name.strip(), overview=overview or "")
        self._classes[new_class.id] = new_class
        logger.debug("Created class %s (%s)", new_class.name, new_class.id)
        return new_class

    def get_class(self, class_id: str) -> Class:
        try:
            return self._classes[class_id]
        except KeyError:
            raise NotFoundError(f"Class not found: {class_id}") from None

    def list_classes(self) -> list[Class]:
        return list(self._classes.values())

    def add_assignment(self, class_id: str, name: str, due_date: date) -> Assignment:
        """Adds an assignment to a class.

        :param class_id: Id of the owning class.
        :param name: Name of the assignment; must not be blank.
        :param due_date: Due day; today is allowed, anything earlier is not.
        :return: The new Assignment.
        """
        owner = self.get_class(class_id)
        if not name or not name.strip():
            raise ValidationError("Assignment name cannot be empty.")
        due_date = as_day(due_date)
        self._check_not_past(due_date, "Due date")
        assignment = Assignment(name=name.strip(), due_date=due_date)
        owner.assignments.append(assignment)
        self._owners[assignment.id] = owner.id
        return assignment

    def get_assignment(self, assignment_id: str) -> Assignment:
        owner = self._owner_of(assignment_id)
        for assignment in owner.assignments:
            if assignment.id == assignment_id:
                return assignment
        raise NotFoundError(f"Assignment not found: {assignment_id}")

    def change_assignment_due_date(self, assignment: Assignment, new_due_date: date) -> None:
        """Moves an assignment to a new due day, in place."""
        new_due_date = as_day(new_due_date)
        self._check_not_past(new_due_date, "New due date")
        assignment.due_date = new_due_date

    def remove_assignment(self, assignment: Assignment) -> None:
        """Removes an assignment from whichever class holds it."""
        owner = self._owner_of(assignment.id)
        owner.assignments[:] = [a for a in owner.assignments if a.id != assignment.id]
        del self._owners[assignment.id]

    def list_assignments(self, class_id: str) -> list[Assignment]:
        """Returns the live assignment collection of a class."""
        return self.get_class(class_id).assignments

    def has_assignment_named(self, class_id: str, name: str) -> bool:
        return any(a.name == name for a in self.list_assignments(class_id))

    def _owner_of(self, assignment_id: str) -> Class:
        class_id = self._owners.get(assignment_id)
        if class_id is None:
            raise NotFoundError(f"Assignment not found: {assignment_id}")
        return self._classes[class_id]

    def _check_not_past(self, day: date, label: str) -> None:
        today = self.today()
        if day < today:
            raise ValidationError(f"{label} {day.isoformat()} is before today ({today.isoformat()}).")
