from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .tables import COLOR_RARITY
from .types import Card, ColorCode, FiberCode


@dataclass(frozen=True)
class HandAnalysis:
    color_counts: dict[ColorCode, int]
    fiber_counts: dict[FiberCode, int]
    # (color, count) by count desc, then rarity desc
    ranked_colors: tuple[tuple[ColorCode, int], ...]

    @property
    def count_shape(self) -> tuple[int, ...]:
        return tuple(count for _, count in self.ranked_colors)

    def fiber_count(self, fiber: FiberCode) -> int:
        return self.fiber_counts.get(fiber, 0)


def color_rarity(color: ColorCode) -> int:
    return COLOR_RARITY[color]


def analyze(cards: Sequence[Card]) -> HandAnalysis:
    """Count colors and fibers of any number of cards and rank the colors.

    Colors sharing a count are ordered rarest first, which is what decides the
    "main" pair or triple downstream.
    """
    color_counts = dict(Counter(c.color for c in cards))
    fiber_counts = dict(Counter(c.fiber for c in cards))
    ranked = sorted(
        color_counts.items(),
        key=lambda item: (item[1], COLOR_RARITY[item[0]]),
        reverse=True,
    )
    return HandAnalysis(
        color_counts=color_counts,
        fiber_counts=fiber_counts,
        ranked_colors=tuple(ranked),
    )


def find_color_with_at_least(
    color_counts: Mapping[ColorCode, int], min_count: int
) -> ColorCode | None:
    """Rarest color having at least `min_count` cards (rarity wins over count)."""
    best: ColorCode | None = None
    for color, count in color_counts.items():
        if count < min_count:
            continue
        if best is None or COLOR_RARITY[color] > COLOR_RARITY[best]:
            best = color
    return best


def find_most_frequent_color(color_counts: Mapping[ColorCode, int]) -> ColorCode | None:
    best: ColorCode | None = None
    best_key = (0, -1)
    for color, count in color_counts.items():
        if count <= 0:
            continue
        key = (count, COLOR_RARITY[color])
        if key > best_key:
            best_key = key
            best = color
    return best
