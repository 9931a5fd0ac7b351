"""Deterministic, headless rules engine for catpoker.

IMPORTANT: This package performs no I/O; the catalog and the random source are
always passed in.
"""

from .analysis import HandAnalysis, analyze, find_color_with_at_least, find_most_frequent_color
from .dealer import decide_dealer_exchange, execute_dealer_exchange
from .deck import build_full_deck, draw_cards, shuffle
from .errors import InsufficientCards, InvalidHandSize, RulesError
from .outcome import determine_outcome, resolve_contest, score_delta
from .roles import evaluate_role, role_candidates
from .types import (
    Card,
    CardCatalog,
    ColorCode,
    ContestOutcome,
    ExchangeDecision,
    FiberCode,
    Outcome,
    Role,
    RoleCategory,
    RulesConfig,
)

__all__ = [
    "Card",
    "CardCatalog",
    "ColorCode",
    "ContestOutcome",
    "ExchangeDecision",
    "FiberCode",
    "HandAnalysis",
    "InsufficientCards",
    "InvalidHandSize",
    "Outcome",
    "Role",
    "RoleCategory",
    "RulesConfig",
    "RulesError",
    "analyze",
    "build_full_deck",
    "decide_dealer_exchange",
    "determine_outcome",
    "draw_cards",
    "evaluate_role",
    "execute_dealer_exchange",
    "find_color_with_at_least",
    "find_most_frequent_color",
    "resolve_contest",
    "role_candidates",
    "score_delta",
    "shuffle",
]
