"""catpoker: rules and scoring core of a five-card cat-coat matching game."""

from .api import (
    decide_dealer_exchange,
    determine_outcome,
    draw_cards,
    evaluate_role,
    execute_dealer_exchange,
    resolve_contest,
    score_delta,
)
from .engine.errors import InsufficientCards, InvalidHandSize, RulesError

__version__ = "0.1.0"

__all__ = [
    "InsufficientCards",
    "InvalidHandSize",
    "RulesError",
    "decide_dealer_exchange",
    "determine_outcome",
    "draw_cards",
    "evaluate_role",
    "execute_dealer_exchange",
    "resolve_contest",
    "score_delta",
]
