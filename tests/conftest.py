from __future__ import annotations
import enum
from typing import List, Sequence

import pytest


class Event(enum.Enum):
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"


class UserAction(enum.Enum):
    SignIn = "sign_in"
    SignOut = "sign_out"
    CreateTodo = "create_todo"


class FixedSampler:
    """Always picks the same index and remembers the weights it was offered."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls: List[List[int]] = []

    def choose_index(self, weights: Sequence[int]) -> int:
        self.calls.append(list(weights))
        return self.index

    def fork(self) -> "FixedSampler":
        return FixedSampler(self.index)


@pytest.fixture
def ev():
    return Event


@pytest.fixture
def actions():
    return UserAction


@pytest.fixture
def fixed_sampler():
    return FixedSampler
