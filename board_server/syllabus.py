# -*- coding: utf-8 -*-
from __future__ import annotations

from .errors import ValidationError


class SyllabusRegistry:
    """Holds the single current syllabus text of a board. Last write wins."""

    def __init__(self) -> None:
        self._text = ""

    def set_syllabus(self, text: str) -> None:
        """Replaces the stored syllabus.

        :param text: Syllabus text; blank text is rejected.
        """
        if not text or not text.strip():
            raise ValidationError("Syllabus cannot be empty.")
        self._text = text.strip()

    def get_syllabus(self) -> str:
        """Returns the current syllabus, or an empty string if none was set."""
        return self._text
