from __future__ import annotations


class MarkovChainError(Exception):
    """Base class for chain misuse."""


class InvalidOrderError(MarkovChainError, ValueError):
    """Raised when a chain is built with an order that is not a positive int."""

    def __init__(self, order: object):
        super().__init__(f"order must be a positive integer, got {order!r}")
        self.order = order


class HistoryLengthError(MarkovChainError, ValueError):
    """Raised when a history does not hold exactly `order` events."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"invalid history size: expected {expected} events, got {actual}")
        self.expected = expected
        self.actual = actual
