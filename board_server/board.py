# -*- coding: utf-8 -*-
"""
The board: root container owning classes, their assignments and the current syllabus.
"""
from __future__ import annotations

import typing as t
from datetime import date

from orchestrator.extraction import extract_and_commit
from syllabus_server.llm import LLMClient

from .errors import ValidationError
from .models import Assignment, Class
from .store import AssignmentStore
from .syllabus import SyllabusRegistry


class Board:
    """Facade over one AssignmentStore and one SyllabusRegistry.

    The syllabus is held at board scope, not per class. Not safe for
    concurrent use; run one extraction at a time per board.
    """

    def __init__(self, clock: t.Callable[[], date] = date.today) -> None:
        self.store = AssignmentStore(clock=clock)
        self.syllabus = SyllabusRegistry()

    def create_class(self, name: str, overview: str = "") -> Class:
        return self.store.create_class(name, overview)

    def get_class(self, class_id: str) -> Class:
        return self.store.get_class(class_id)

    def list_classes(self) -> list[Class]:
        return self.store.list_classes()

    def add_assignment(self, class_id: str, name: str, due_date: date) -> Assignment:
        return self.store.add_assignment(class_id, name, due_date)

    def get_assignment(self, assignment_id: str) -> Assignment:
        return self.store.get_assignment(assignment_id)

    def change_assignment_due_date(self, assignment: Assignment, new_due_date: date) -> None:
        self.store.change_assignment_due_date(assignment, new_due_date)

    def remove_assignment(self, assignment: Assignment) -> None:
        self.store.remove_assignment(assignment)

    def list_assignments(self, class_id: str) -> list[Assignment]:
        return self.store.list_assignments(class_id)

    def set_syllabus(self, text: str) -> None:
        self.syllabus.set_syllabus(text)

    def get_syllabus(self) -> str:
        return self.syllabus.get_syllabus()

    def check_can_extract(self, class_id: str) -> str:
        """Checks that a class exists and a syllabus is stored, before any LLM is involved.

        :param class_id: Id of the class receiving the assignments.
        :return: The stored syllabus text.
        """
        self.store.get_class(class_id)
        syllabus_text = self.get_syllabus()
        if not syllabus_text:
            raise ValidationError("No syllabus has been set.")
        return syllabus_text

    async def extract_assignments(
            self,
            class_id: str,
            llm: LLMClient,
            atomic: bool = False,
    ) -> list[Assignment]:
        """Extracts assignments from the stored syllabus into a class.

        :param class_id: Id of the class receiving the assignments.
        :param llm: The LLM capability to ask.
        :param atomic: Reject the whole batch on a duplicate name instead of
            keeping the assignments added before it.
        :return: The assignments added.
        """
        syllabus_text = self.check_can_extract(class_id)
        return await extract_and_commit(self.store, class_id, syllabus_text, llm, atomic=atomic)
