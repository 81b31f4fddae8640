# -*- coding: utf-8 -*-
import pytest

from board_server.board import Board
from board_server.store import AssignmentStore
from stubs import TODAY


@pytest.fixture
def store() -> AssignmentStore:
    return AssignmentStore(clock=lambda: TODAY)


@pytest.fixture
def board() -> Board:
    return Board(clock=lambda: TODAY)
