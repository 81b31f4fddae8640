# -*- coding: utf-8 -*-
"""Tests for the in-memory assignment store."""
from datetime import date, datetime, timedelta

import pytest

from board_server.errors import NotFoundError, ValidationError
from board_server.store import AssignmentStore
from stubs import TODAY


def test_create_class_registers_class(store: AssignmentStore) -> None:
    cls = store.create_class("  Physics 101 ", "Mechanics")

    assert cls.name == "Physics 101"
    assert cls.overview == "Mechanics"
    assert cls.assignments == []
    assert store.get_class(cls.id) is cls


def test_create_class_allocates_unique_ids(store: AssignmentStore) -> None:
    first = store.create_class("Physics 101", "")
    second = store.create_class("Physics 101", "")

    assert first.id != second.id
    assert len(store.list_classes()) == 2


@pytest.mark.parametrize("name", ["", "   ", "\n\t"])
def test_create_class_rejects_blank_name(store: AssignmentStore, name: str) -> None:
    with pytest.raises(ValidationError):
        store.create_class(name, "overview")


def test_add_then_list_round_trip(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "Hello")
    due = TODAY + timedelta(days=1)

    work = store.add_assignment(cls.id, "Homework 1", due)

    listed = store.list_assignments(cls.id)
    assert len(listed) == 1
    assert listed[0].name == "Homework 1"
    assert listed[0].due_date == due
    assert listed[0] is work


def test_add_assignment_accepts_today(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")

    work = store.add_assignment(cls.id, "Quiz", TODAY)

    assert work.due_date == TODAY


def test_add_assignment_trims_name(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")

    assignment = store.add_assignment(cls.id, " Pset#1 ", date(2025, 10, 5))

    assert assignment.name == "Pset#1"
    assert store.has_assignment_named(cls.id, "Pset#1")


def test_add_assignment_truncates_datetime_to_day(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")

    work = store.add_assignment(cls.id, "Quiz", datetime(2025, 8, 1, 0, 0))

    assert work.due_date == date(2025, 8, 1)
    assert not isinstance(work.due_date, datetime)


def test_add_assignment_rejects_past_date(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")

    with pytest.raises(ValidationError):
        store.add_assignment(cls.id, "Homework 0", TODAY - timedelta(days=1))
    assert store.list_assignments(cls.id) == []


def test_add_assignment_rejects_blank_name(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")

    with pytest.raises(ValidationError):
        store.add_assignment(cls.id, "  ", TODAY)


def test_add_assignment_unknown_class(store: AssignmentStore) -> None:
    with pytest.raises(NotFoundError):
        store.add_assignment("missing", "Homework 1", TODAY)


def test_list_assignments_unknown_class(store: AssignmentStore) -> None:
    with pytest.raises(NotFoundError):
        store.list_assignments("missing")


def test_change_due_date_mutates_in_place(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")
    work = store.add_assignment(cls.id, "Homework 1", TODAY)

    store.change_assignment_due_date(work, date(2025, 9, 1))

    assert store.list_assignments(cls.id)[0].due_date == date(2025, 9, 1)


def test_change_due_date_rejects_past(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")
    work = store.add_assignment(cls.id, "Homework 1", TODAY)

    with pytest.raises(ValidationError):
        store.change_assignment_due_date(work, TODAY - timedelta(days=3))
    assert work.due_date == TODAY


def test_remove_assignment_finds_owner(store: AssignmentStore) -> None:
    physics = store.create_class("Physics 101", "")
    chemistry = store.create_class("Chemistry 101", "")
    keep = store.add_assignment(physics.id, "Homework 1", TODAY)
    drop = store.add_assignment(chemistry.id, "Lab 1", TODAY)

    store.remove_assignment(drop)

    assert store.list_assignments(chemistry.id) == []
    assert store.list_assignments(physics.id) == [keep]


def test_second_removal_fails(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")
    work = store.add_assignment(cls.id, "Homework 1", TODAY)

    store.remove_assignment(work)

    with pytest.raises(NotFoundError):
        store.remove_assignment(work)


def test_get_assignment_by_id(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")
    work = store.add_assignment(cls.id, "Homework 1", TODAY)

    assert store.get_assignment(work.id) is work
    store.remove_assignment(work)
    with pytest.raises(NotFoundError):
        store.get_assignment(work.id)


def test_has_assignment_named_is_case_sensitive(store: AssignmentStore) -> None:
    cls = store.create_class("Physics 101", "")
    store.add_assignment(cls.id, "Pset#1", TODAY)

    assert store.has_assignment_named(cls.id, "Pset#1")
    assert not store.has_assignment_named(cls.id, "pset#1")
