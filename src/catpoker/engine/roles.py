from __future__ import annotations

import logging
from collections.abc import Sequence

from .analysis import HandAnalysis, analyze
from .errors import InvalidHandSize
from .tables import (
    COLOR_NAMES,
    FIBER_SET_NAMES,
    FIBER_SET_POINTS,
    FLUSH_POINTS,
    FOUR_OF_COLOR_POINTS,
    NO_PAIR_NAME,
    NO_PAIR_POINTS,
    ONE_PAIR_POINTS,
    THREE_OF_COLOR_POINTS,
    full_house_points,
    two_pair_points,
)
from .types import Card, ColorCode, Role, RulesConfig

logger = logging.getLogger(__name__)


def _ids_of_colors(hand: Sequence[Card], *colors: ColorCode) -> tuple[int, ...]:
    return tuple(c.id for c in hand if c.color in colors)


def _flush(hand: Sequence[Card], a: HandAnalysis) -> Role | None:
    for color, count in a.color_counts.items():
        if count == 5:
            return Role(
                category="flush",
                display_name=f"{COLOR_NAMES[color]} Flush",
                points=FLUSH_POINTS[color],
                matching_card_ids=tuple(c.id for c in hand),
            )
    return None


def _fiber_set(hand: Sequence[Card], a: HandAnalysis) -> Role | None:
    for fiber, count in a.fiber_counts.items():
        if count == 5:
            return Role(
                category="fiber_set",
                display_name=FIBER_SET_NAMES[fiber],
                points=FIBER_SET_POINTS[fiber],
                matching_card_ids=tuple(c.id for c in hand),
            )
    return None


def _four_of_color(hand: Sequence[Card], a: HandAnalysis) -> Role | None:
    if a.count_shape[0] != 4:
        return None
    color = a.ranked_colors[0][0]
    return Role(
        category="four_of_color",
        display_name=f"{COLOR_NAMES[color]} Four of a Color",
        points=FOUR_OF_COLOR_POINTS[color],
        matching_card_ids=_ids_of_colors(hand, color),
    )


def _full_house(hand: Sequence[Card], a: HandAnalysis) -> Role | None:
    if a.count_shape != (3, 2):
        return None
    three, two = a.ranked_colors[0][0], a.ranked_colors[1][0]
    return Role(
        category="full_house",
        display_name=f"{COLOR_NAMES[three]} × {COLOR_NAMES[two]} Full House",
        points=full_house_points(three, two),
        matching_card_ids=tuple(c.id for c in hand),
    )


def _three_of_color(hand: Sequence[Card], a: HandAnalysis) -> Role | None:
    if a.count_shape != (3, 1, 1):
        return None
    color = a.ranked_colors[0][0]
    return Role(
        category="three_of_color",
        display_name=f"{COLOR_NAMES[color]} Three of a Color",
        points=THREE_OF_COLOR_POINTS[color],
        matching_card_ids=_ids_of_colors(hand, color),
    )


def _two_pair(hand: Sequence[Card], a: HandAnalysis) -> Role | None:
    if a.count_shape != (2, 2, 1):
        return None
    # ranked_colors puts the rarer pair first
    first, second = a.ranked_colors[0][0], a.ranked_colors[1][0]
    return Role(
        category="two_pair",
        display_name=f"{COLOR_NAMES[first]} × {COLOR_NAMES[second]} Two Pair",
        points=two_pair_points(first, second),
        matching_card_ids=_ids_of_colors(hand, first, second),
    )


def _one_pair(hand: Sequence[Card], a: HandAnalysis) -> Role | None:
    if a.count_shape != (2, 1, 1, 1):
        return None
    color = a.ranked_colors[0][0]
    return Role(
        category="one_pair",
        display_name=f"{COLOR_NAMES[color]} One Pair",
        points=ONE_PAIR_POINTS[color],
        matching_card_ids=_ids_of_colors(hand, color),
    )


_PATTERNS = (
    _flush,
    _fiber_set,
    _four_of_color,
    _full_house,
    _three_of_color,
    _two_pair,
    _one_pair,
)

NO_PAIR = Role(category="no_pair", display_name=NO_PAIR_NAME, points=NO_PAIR_POINTS)


def _check_hand(hand: Sequence[Card], config: RulesConfig | None) -> None:
    cfg = config or RulesConfig()
    if len(hand) != cfg.hand_size:
        raise InvalidHandSize(actual=len(hand), expected=cfg.hand_size)


def role_candidates(hand: Sequence[Card], config: RulesConfig | None = None) -> list[Role]:
    """Every role the hand satisfies, best first. "No Pair" is always last."""
    _check_hand(hand, config)
    analysis = analyze(hand)
    candidates: list[Role] = []
    for pattern in _PATTERNS:
        role = pattern(hand, analysis)
        if role is not None:
            candidates.append(role)
    candidates.sort(key=lambda r: r.points, reverse=True)
    candidates.append(NO_PAIR)
    return candidates


def evaluate_role(hand: Sequence[Card], config: RulesConfig | None = None) -> Role:
    """Pick the highest-scoring role of a hand.

    Patterns overlap (a flush of one fiber is also a fiber set, a pair of short-haired
    cards is also a short fur set), so every candidate is scored and the maximum wins.
    The point tables never produce a tie between two satisfied patterns.
    """
    best = role_candidates(hand, config)[0]
    logger.debug("Hand %s evaluated as %s (%d pts)", [c.id for c in hand], best.display_name, best.points)
    return best
