from __future__ import annotations
from pydantic import BaseModel, Field, PositiveInt
from typing import Any, Optional


class ChainConfig(BaseModel):
    order: PositiveInt = 1
    # None -> unseeded random source
    seed: Optional[int] = None


class Transition(BaseModel):
    event: Any
    count: PositiveInt


class ChainStats(BaseModel):
    order: PositiveInt
    # Number of distinct histories learned.
    histories: int = 0
    # Number of distinct (history, next) pairs.
    transitions: int = 0
    # Total windows observed across all updates.
    observations: int = 0
    memory: list[Any] = Field(default_factory=list)
