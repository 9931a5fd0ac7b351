from __future__ import annotations


class RulesError(RuntimeError):
    pass


class InsufficientCards(RulesError):
    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"Not enough cards to draw (needed: {needed}, available: {available})")
        self.needed = needed
        self.available = available


class InvalidHandSize(RulesError):
    def __init__(self, actual: int, expected: int = 5) -> None:
        super().__init__(f"A hand must be exactly {expected} cards (got {actual})")
        self.actual = actual
        self.expected = expected
