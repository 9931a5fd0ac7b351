"""Call-level contracts used by the game-flow layer.

These bind the engine to the process-wide default catalog; callers that manage
their own catalog can use `catpoker.engine` directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from catpoker.content import default_catalog
from catpoker.engine import dealer, deck, outcome, roles
from catpoker.engine.deck import RandomSource
from catpoker.engine.types import Card, ContestOutcome, ExchangeDecision, Outcome, Role


def draw_cards(count: int, exclude_ids: Iterable[int] = (), rand: RandomSource | None = None) -> list[Card]:
    return deck.draw_cards(default_catalog(), count, exclude_ids, rand)


def evaluate_role(hand: Sequence[Card]) -> Role:
    return roles.evaluate_role(hand)


def decide_dealer_exchange(hand: Sequence[Card]) -> ExchangeDecision:
    return dealer.decide_dealer_exchange(hand)


def execute_dealer_exchange(
    hand: Sequence[Card], new_cards: Sequence[Card], cards_to_exchange: Sequence[int]
) -> list[Card]:
    return dealer.execute_dealer_exchange(hand, new_cards, cards_to_exchange)


def determine_outcome(player_role: Role, opponent_role: Role) -> Outcome:
    return outcome.determine_outcome(player_role, opponent_role)


def score_delta(result: Outcome, player_role: Role, opponent_role: Role) -> int:
    return outcome.score_delta(result, player_role, opponent_role)


def resolve_contest(player_role: Role, opponent_role: Role) -> ContestOutcome:
    return outcome.resolve_contest(player_role, opponent_role)
