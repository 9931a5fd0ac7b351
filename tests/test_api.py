from __future__ import annotations

import logging
import random

import pytest

import catpoker
from catpoker.engine.types import Card, ColorCode, FiberCode
from catpoker.logging_utils import setup_logging


def test_public_contracts_round_trip() -> None:
    rand = random.Random(11).random
    hand = catpoker.draw_cards(5, rand=rand)
    assert len(hand) == 5

    decision = catpoker.decide_dealer_exchange(hand)
    in_play = [c.id for c in hand]
    new_cards = catpoker.draw_cards(len(decision.cards_to_exchange), in_play, rand)
    after = catpoker.execute_dealer_exchange(hand, new_cards, decision.cards_to_exchange)
    assert len({c.id for c in after}) == 5

    mine = catpoker.evaluate_role(hand)
    theirs = catpoker.evaluate_role(after)
    result = catpoker.determine_outcome(mine, theirs)
    assert catpoker.resolve_contest(mine, theirs).delta == catpoker.score_delta(result, mine, theirs)


def test_public_errors() -> None:
    with pytest.raises(catpoker.InsufficientCards):
        catpoker.draw_cards(230)
    with pytest.raises(catpoker.InvalidHandSize):
        catpoker.evaluate_role([Card(id=0, color=ColorCode.GRAY, fiber=FiberCode.LONG)])
    assert issubclass(catpoker.InsufficientCards, catpoker.RulesError)
    assert issubclass(catpoker.InvalidHandSize, catpoker.RulesError)


def test_engine_logs_dealer_decisions(caplog: pytest.LogCaptureFixture) -> None:
    hand = [Card(id=i, color=ColorCode.VAN, fiber=FiberCode.SHORT) for i in range(5)]
    with caplog.at_level(logging.DEBUG, logger="catpoker.engine.dealer"):
        catpoker.decide_dealer_exchange(hand)
    assert "flush complete" in caplog.text


def test_setup_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setenv("CATPOKER_LOG_LEVEL", "warning")
    try:
        root.handlers = []
        setup_logging()
        assert root.level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
