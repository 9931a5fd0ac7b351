from __future__ import annotations

from collections.abc import Sequence

from .tables import COLOR_NAMES, FIBER_NAMES
from .types import Card, ContestOutcome, ExchangeDecision, Role


def card_to_dict(card: Card) -> dict[str, object]:
    return {
        "id": card.id,
        "color": int(card.color),
        "color_name": COLOR_NAMES[card.color],
        "fiber": int(card.fiber),
        "fiber_name": FIBER_NAMES[card.fiber],
    }


def hand_to_list(hand: Sequence[Card]) -> list[dict[str, object]]:
    return [card_to_dict(c) for c in hand]


def role_to_dict(role: Role) -> dict[str, object]:
    return {
        "category": role.category,
        "name": role.display_name,
        "points": role.points,
        "matching_card_ids": list(role.matching_card_ids),
    }


def decision_to_dict(decision: ExchangeDecision) -> dict[str, object]:
    return {
        "cards_to_exchange": list(decision.cards_to_exchange),
        "rationale": decision.rationale,
    }


def contest_to_dict(player: Role, opponent: Role, outcome: ContestOutcome) -> dict[str, object]:
    """Return a JSON-serializable summary of one settled contest."""
    return {
        "result": outcome.result,
        "delta": outcome.delta,
        "player_role": role_to_dict(player),
        "opponent_role": role_to_dict(opponent),
    }
