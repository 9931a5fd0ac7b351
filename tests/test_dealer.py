from __future__ import annotations

import random

from catpoker.content import default_catalog
from catpoker.engine.analysis import analyze
from catpoker.engine.dealer import DEALER_RULES, decide_dealer_exchange, execute_dealer_exchange
from catpoker.engine.deck import draw_cards
from catpoker.engine.types import Card, ColorCode, FiberCode


def _card(card_id: int, color: int, fiber: int = 1) -> Card:
    return Card(id=card_id, color=ColorCode(color), fiber=FiberCode(fiber))


def test_flush_chase_discards_the_odd_card() -> None:
    hand = [_card(0, 11), _card(1, 11), _card(2, 11, 0), _card(3, 11), _card(4, 0)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (4,)
    assert decision.rationale.startswith("flush chase")


def test_complete_flush_keeps_everything() -> None:
    hand = [_card(i, 11, i % 2) for i in range(5)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == ()
    assert decision.rationale.startswith("flush complete")


def test_long_fur_chase_discards_short_cards() -> None:
    hand = [_card(0, 0, 0), _card(1, 1, 0), _card(2, 2, 0), _card(3, 3, 0), _card(4, 4, 1)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (4,)
    assert decision.rationale.startswith("long fur chase")


def test_complete_long_fur_keeps_everything() -> None:
    hand = [_card(i, i, 0) for i in range(5)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == ()
    assert decision.rationale.startswith("long fur complete")


def test_flush_chase_outranks_long_fur() -> None:
    hand = [_card(0, 11, 0), _card(1, 11, 0), _card(2, 11, 0), _card(3, 11, 0), _card(4, 0, 0)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (4,)
    assert decision.rationale.startswith("flush chase")


def test_four_of_color_with_long_fur_still_chases_flush() -> None:
    # four long-haired orange tabbies also satisfy the long fur and multi-of-color rules
    hand = [_card(0, 0, 0), _card(1, 0, 0), _card(2, 0, 0), _card(3, 0, 0), _card(4, 5, 1)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (4,)
    assert decision.rationale.startswith("flush chase")


def test_multi_of_color_chase() -> None:
    hand = [_card(0, 11), _card(1, 11), _card(2, 11, 0), _card(3, 0), _card(4, 1)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (3, 4)
    assert decision.rationale.startswith("multi-of-color chase")


def test_full_house_keeps_the_triple() -> None:
    hand = [_card(0, 0), _card(1, 0), _card(2, 0), _card(3, 11), _card(4, 11)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (3, 4)
    assert decision.rationale.startswith("multi-of-color chase")


def test_pair_chase_discards_three() -> None:
    hand = [_card(0, 2), _card(1, 5), _card(2, 2), _card(3, 7), _card(4, 9)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (1, 3, 4)
    assert decision.rationale.startswith("pair chase")


def test_two_pair_keeps_the_rarer_pair() -> None:
    hand = [_card(0, 0), _card(1, 0), _card(2, 11), _card(3, 11), _card(4, 4)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (0, 1, 4)
    assert "Tortoiseshell" in decision.rationale


def test_no_pattern_keeps_rarest_single() -> None:
    hand = [_card(0, 4), _card(1, 6), _card(2, 1), _card(3, 9), _card(4, 5)]
    decision = decide_dealer_exchange(hand)
    assert decision.cards_to_exchange == (0, 1, 3, 4)
    assert decision.rationale.startswith("most frequent color")
    assert "Calico" in decision.rationale


def test_empty_hand() -> None:
    decision = decide_dealer_exchange([])
    assert decision.cards_to_exchange == ()
    assert decision.rationale.startswith("empty hand")


def test_each_rule_declines_when_it_does_not_apply() -> None:
    hand = [_card(0, 4), _card(1, 6), _card(2, 1), _card(3, 9), _card(4, 5)]
    analysis = analyze(hand)
    results = [rule(hand, analysis) for rule in DEALER_RULES]
    assert results[:4] == [None, None, None, None]
    assert results[4] is not None


def test_decisions_are_subsets_without_duplicates() -> None:
    catalog = default_catalog()
    rng = random.Random(77)
    for _ in range(300):
        hand = draw_cards(catalog, 5, rand=rng.random)
        decision = decide_dealer_exchange(hand)
        ids = decision.cards_to_exchange
        assert len(set(ids)) == len(ids)
        assert set(ids) <= {c.id for c in hand}
        assert len(ids) < 5


def test_execute_replaces_in_hand_order() -> None:
    hand = [_card(i, i) for i in range(5)]
    new = [_card(100, 11), _card(101, 10)]
    out = execute_dealer_exchange(hand, new, [3, 1])
    assert [c.id for c in out] == [0, 100, 2, 101, 4]
    assert [c.id for c in hand] == [0, 1, 2, 3, 4]


def test_execute_tolerates_partial_replacement() -> None:
    hand = [_card(i, i) for i in range(5)]
    out = execute_dealer_exchange(hand, [_card(100, 11)], [0, 2, 4])
    assert [c.id for c in out] == [100, 1, 2, 3, 4]


def test_execute_with_nothing_to_exchange() -> None:
    hand = [_card(i, i) for i in range(5)]
    assert execute_dealer_exchange(hand, [_card(100, 11)], []) == hand
