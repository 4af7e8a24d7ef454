import dataclasses

import pytest

from baccarat_roads.core.round import Outcome, PairFlag, Round


def test_copy_is_equal_but_distinct():
    r = Round(7, 8.5, Outcome.BANKER_WIN, PairFlag.PLAYER_PAIR)
    c = r.copy()
    assert c == r and c is not r
    assert (c.order, c.result, c.outcome, c.pair) == (7, 8.5, Outcome.BANKER_WIN, PairFlag.PLAYER_PAIR)


def test_round_is_immutable():
    r = Round(0, 0, Outcome.TIE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.order = 3
    assert r.pair is PairFlag.NO_PAIR and r.is_tie
