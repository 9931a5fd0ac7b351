"""Static rarity, naming and role-point tables.

Rarity runs from 1 (commonest coat) to 12 (rarest). Every point table is keyed
so that a rarer color always scores more within the same category.
"""

from __future__ import annotations

import math

from .types import ColorCode, FiberCode

C = ColorCode

COLOR_RARITY: dict[ColorCode, int] = {
    C.TORTOISESHELL: 12,
    C.CALICO: 11,
    C.VAN: 10,
    C.WHITE: 9,
    C.BLACK: 8,
    C.SILVER_TABBY: 7,
    C.BLACK_WHITE: 6,
    C.BROWN_TABBY_WHITE: 5,
    C.GRAY: 4,
    C.ORANGE_TABBY: 3,
    C.BROWN_TABBY: 2,
    C.ORANGE_WHITE: 1,
}

COLOR_NAMES: dict[ColorCode, str] = {
    C.ORANGE_TABBY: "Orange Tabby",
    C.CALICO: "Calico",
    C.WHITE: "White",
    C.BLACK: "Black",
    C.ORANGE_WHITE: "Orange and White",
    C.BROWN_TABBY_WHITE: "Brown Tabby and White",
    C.BROWN_TABBY: "Brown Tabby",
    C.BLACK_WHITE: "Black and White",
    C.SILVER_TABBY: "Silver Tabby",
    C.GRAY: "Gray",
    C.VAN: "Van",
    C.TORTOISESHELL: "Tortoiseshell",
}

FIBER_NAMES: dict[FiberCode, str] = {
    FiberCode.LONG: "Long-haired",
    FiberCode.SHORT: "Short-haired",
}

FLUSH_POINTS: dict[ColorCode, int] = {
    C.TORTOISESHELL: 300,
    C.CALICO: 299,
    C.VAN: 298,
    C.WHITE: 296,
    C.BLACK: 295,
    C.SILVER_TABBY: 288,
    C.BLACK_WHITE: 282,
    C.BROWN_TABBY_WHITE: 258,
    C.GRAY: 250,
    C.ORANGE_TABBY: 226,
    C.BROWN_TABBY: 225,
    C.ORANGE_WHITE: 198,
}

FOUR_OF_COLOR_POINTS: dict[ColorCode, int] = {
    C.TORTOISESHELL: 277,
    C.CALICO: 213,
    C.VAN: 197,
    C.WHITE: 180,
    C.BLACK: 166,
    C.SILVER_TABBY: 143,
    C.BLACK_WHITE: 123,
    C.BROWN_TABBY_WHITE: 98,
    C.GRAY: 92,
    C.ORANGE_TABBY: 80,
    C.BROWN_TABBY: 79,
    C.ORANGE_WHITE: 63,
}

THREE_OF_COLOR_POINTS: dict[ColorCode, int] = {
    C.TORTOISESHELL: 112,
    C.CALICO: 70,
    C.VAN: 60,
    C.WHITE: 50,
    C.BLACK: 42,
    C.SILVER_TABBY: 35,
    C.BLACK_WHITE: 29,
    C.BROWN_TABBY_WHITE: 22,
    C.GRAY: 19,
    C.ORANGE_TABBY: 18,
    C.BROWN_TABBY: 17,
    C.ORANGE_WHITE: 16,
}

ONE_PAIR_POINTS: dict[ColorCode, int] = {
    C.TORTOISESHELL: 21,
    C.CALICO: 15,
    C.VAN: 13,
    C.WHITE: 12,
    C.BLACK: 11,
    C.SILVER_TABBY: 10,
    C.BLACK_WHITE: 8,
    C.BROWN_TABBY_WHITE: 7,
    C.GRAY: 6,
    C.ORANGE_TABBY: 5,
    C.BROWN_TABBY: 4,
    C.ORANGE_WHITE: 2,
}

FIBER_SET_POINTS: dict[FiberCode, int] = {
    FiberCode.LONG: 100,
    FiberCode.SHORT: 1,
}

FIBER_SET_NAMES: dict[FiberCode, str] = {
    FiberCode.LONG: "Long Fur",
    FiberCode.SHORT: "Short Fur",
}

NO_PAIR_NAME = "No Pair"
NO_PAIR_POINTS = 0

# Linear maps from summed rarity onto the published point ranges.
TWO_PAIR_COEFFICIENT = 6.55
TWO_PAIR_INTERCEPT = 3.35
FULL_HOUSE_COEFFICIENT = 6.097
FULL_HOUSE_INTERCEPT = 80.613


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def two_pair_points(color_a: ColorCode, color_b: ColorCode) -> int:
    """Points for a two pair; symmetric in its arguments (23..154)."""
    score = COLOR_RARITY[color_a] + COLOR_RARITY[color_b]
    return _round_half_up(TWO_PAIR_COEFFICIENT * score + TWO_PAIR_INTERCEPT)


def full_house_points(three_color: ColorCode, two_color: ColorCode) -> int:
    """Points for a full house (105..294).

    The three-card color counts double, so swapping the colors changes the result.
    """
    score = COLOR_RARITY[three_color] * 2 + COLOR_RARITY[two_color]
    return _round_half_up(FULL_HOUSE_COEFFICIENT * score + FULL_HOUSE_INTERCEPT)
