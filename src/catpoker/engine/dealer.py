"""Dealer exchange heuristic.

The dealer walks an ordered list of rules and takes the first one that applies:

  1. flush      - 4+ cards of one color
  2. long fur   - 4+ long-haired cards
  3. multi      - 3+ cards of one color
  4. pair       - 2+ cards of one color
  5. fallback   - keep the most frequent color

Ties between colors go to the rarer one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .analysis import HandAnalysis, analyze, find_color_with_at_least, find_most_frequent_color
from .tables import COLOR_NAMES
from .types import Card, ColorCode, ExchangeDecision, FiberCode

logger = logging.getLogger(__name__)

Rule = Callable[[Sequence[Card], HandAnalysis], ExchangeDecision | None]


def _discard_other_colors(hand: Sequence[Card], keep: ColorCode) -> tuple[int, ...]:
    return tuple(c.id for c in hand if c.color != keep)


def _flush_chase(hand: Sequence[Card], a: HandAnalysis) -> ExchangeDecision | None:
    color = find_color_with_at_least(a.color_counts, 4)
    if color is None:
        return None
    count = a.color_counts[color]
    if count == 5:
        return ExchangeDecision(cards_to_exchange=(), rationale="flush complete (no exchange)")
    return ExchangeDecision(
        cards_to_exchange=_discard_other_colors(hand, color),
        rationale=f"flush chase (holding {count} {COLOR_NAMES[color]})",
    )


def _long_fur_chase(hand: Sequence[Card], a: HandAnalysis) -> ExchangeDecision | None:
    count = a.fiber_count(FiberCode.LONG)
    if count < 4:
        return None
    if count == 5:
        return ExchangeDecision(cards_to_exchange=(), rationale="long fur complete (no exchange)")
    return ExchangeDecision(
        cards_to_exchange=tuple(c.id for c in hand if c.fiber != FiberCode.LONG),
        rationale=f"long fur chase (holding {count} long-haired)",
    )


def _multi_of_color_chase(hand: Sequence[Card], a: HandAnalysis) -> ExchangeDecision | None:
    color = find_color_with_at_least(a.color_counts, 3)
    if color is None:
        return None
    return ExchangeDecision(
        cards_to_exchange=_discard_other_colors(hand, color),
        rationale=f"multi-of-color chase (holding {a.color_counts[color]} {COLOR_NAMES[color]})",
    )


def _pair_chase(hand: Sequence[Card], a: HandAnalysis) -> ExchangeDecision | None:
    color = find_color_with_at_least(a.color_counts, 2)
    if color is None:
        return None
    return ExchangeDecision(
        cards_to_exchange=_discard_other_colors(hand, color),
        rationale=f"pair chase (holding {a.color_counts[color]} {COLOR_NAMES[color]})",
    )


def _keep_most_frequent(hand: Sequence[Card], a: HandAnalysis) -> ExchangeDecision | None:
    color = find_most_frequent_color(a.color_counts)
    if color is None:
        return None
    return ExchangeDecision(
        cards_to_exchange=_discard_other_colors(hand, color),
        rationale=f"most frequent color (keeping {COLOR_NAMES[color]})",
    )


DEALER_RULES: tuple[Rule, ...] = (
    _flush_chase,
    _long_fur_chase,
    _multi_of_color_chase,
    _pair_chase,
    _keep_most_frequent,
)


def decide_dealer_exchange(hand: Sequence[Card]) -> ExchangeDecision:
    """Choose which card ids the dealer throws back. Does not draw replacements."""
    analysis = analyze(hand)
    decision = ExchangeDecision(cards_to_exchange=(), rationale="empty hand (no exchange)")
    for rule in DEALER_RULES:
        picked = rule(hand, analysis)
        if picked is not None:
            decision = picked
            break
    logger.debug(
        "Dealer hand %s -> exchange %s: %s",
        [c.id for c in hand],
        list(decision.cards_to_exchange),
        decision.rationale,
    )
    return decision


def execute_dealer_exchange(
    hand: Sequence[Card], new_cards: Sequence[Card], cards_to_exchange: Sequence[int]
) -> list[Card]:
    """Swap discarded cards for `new_cards`, in hand order.

    When fewer new cards than discards are supplied, the extra discards simply
    stay in the hand.
    """
    discard = set(cards_to_exchange)
    replacements = iter(new_cards)
    out: list[Card] = []
    for card in hand:
        if card.id in discard:
            out.append(next(replacements, card))
        else:
            out.append(card)
    return out
