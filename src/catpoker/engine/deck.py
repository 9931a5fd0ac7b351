from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable, Sequence

from .errors import InsufficientCards
from .types import Card, CardCatalog

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]


def build_full_deck(catalog: CardCatalog) -> list[Card]:
    """Return every catalog card in id order.

    Rebuilt on each call; there is no persistent deck between draws.
    """
    return list(catalog.cards)


def shuffle(cards: Sequence[Card], rand: RandomSource | None = None) -> list[Card]:
    """Fisher-Yates shuffle into a new list.

    `rand` must return uniform floats in [0, 1). It is called exactly
    `len(cards) - 1` times (never for one card or less), so a seeded or scripted
    source replays the same order.
    """
    rand = rand or random.random
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = min(int(rand() * (i + 1)), i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def draw_cards(
    catalog: CardCatalog,
    count: int,
    exclude_ids: Iterable[int] = (),
    rand: RandomSource | None = None,
) -> list[Card]:
    excluded = set(exclude_ids)
    pool = [c for c in build_full_deck(catalog) if c.id not in excluded]

    if count < 0 or len(pool) < count:
        raise InsufficientCards(needed=count, available=len(pool))
    if count == 0:
        return []

    drawn = shuffle(pool, rand)[:count]
    logger.debug(
        "Drew %d card(s) from a pool of %d (excluded %d): %s",
        count,
        len(pool),
        len(excluded),
        [c.id for c in drawn],
    )
    return drawn
