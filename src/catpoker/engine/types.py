from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Literal


class ColorCode(IntEnum):
    ORANGE_TABBY = 0
    CALICO = 1
    WHITE = 2
    BLACK = 3
    ORANGE_WHITE = 4
    BROWN_TABBY_WHITE = 5
    BROWN_TABBY = 6
    BLACK_WHITE = 7
    SILVER_TABBY = 8
    GRAY = 9
    VAN = 10
    TORTOISESHELL = 11


class FiberCode(IntEnum):
    LONG = 0
    SHORT = 1


RoleCategory = Literal[
    "flush",
    "fiber_set",
    "four_of_color",
    "full_house",
    "three_of_color",
    "two_pair",
    "one_pair",
    "no_pair",
]

Outcome = Literal["win", "lose", "draw"]


@dataclass(frozen=True)
class RulesConfig:
    hand_size: int = 5
    catalog_size: int = 229


@dataclass(frozen=True)
class Card:
    id: int
    color: ColorCode
    fiber: FiberCode


@dataclass(frozen=True)
class CardCatalog:
    """Immutable, id-ordered card table used by the engine."""

    cards: tuple[Card, ...]

    def get(self, card_id: int) -> Card:
        return self.cards[card_id]

    def all_ids(self) -> Sequence[int]:
        return [c.id for c in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)


@dataclass(frozen=True)
class Role:
    category: RoleCategory
    display_name: str
    points: int
    matching_card_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class ExchangeDecision:
    cards_to_exchange: tuple[int, ...]
    rationale: str


@dataclass(frozen=True)
class ContestOutcome:
    result: Outcome
    delta: int
