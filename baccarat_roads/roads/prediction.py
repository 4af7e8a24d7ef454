from __future__ import annotations
import logging
from typing import ClassVar, List, Optional, Sequence

from baccarat_roads.core.round import Outcome, PairFlag, Round
from baccarat_roads.roads.big_road import BigRoad
from baccarat_roads.roads.derived import DerivedMark, Gap, generate_derived_road
from baccarat_roads.roads.grid import Road, place_streaks

log = logging.getLogger(__name__)


def next_order(rounds: Sequence[Round]) -> int:
    return rounds[-1].order + 1 if rounds else 0


def predict_next_mark(rounds: Sequence[Round], hypothetical: Round, gap: int,
                      rows: int, columns: int) -> Optional[bool]:
    """
    Colour the derived road would draw next if `hypothetical` were played.
    Works on copies of `rounds`. None when `hypothetical` draws no mark
    (a tie, or a road that has not started yet).
    """
    fake_rounds = [r.copy() for r in rounds]
    fake_rounds.append(hypothetical.copy())
    fake_big_road = BigRoad(rows, columns, fake_rounds)
    marks = generate_derived_road(fake_big_road, gap)
    if not marks or marks[-1].order != hypothetical.order:
        return None
    return marks[-1].repeats


class DerivedRoad(Road[DerivedMark]):
    """
    One derived road over a round history, drawn as its own grid
    (same colour goes down, colour change starts a new column).
    Subclasses only pick the gap.
    """
    gap: ClassVar[Gap]
    name: ClassVar[str]

    def __init__(self, rows: int, columns: int, rounds: Sequence[Round]):
        super().__init__(rows, columns, rounds)
        self._big_road = BigRoad(rows, columns, self._rounds)
        self._marks = generate_derived_road(self._big_road, self.gap)
        self._array = place_streaks(self._marks, lambda a, b: a.repeats == b.repeats, rows)

    @property
    def marks(self) -> List[DerivedMark]:
        return list(self._marks)

    def predict(self, outcome: Outcome) -> Optional[bool]:
        fake_next_round = Round(next_order(self._rounds), 0, outcome, PairFlag.NO_PAIR)
        prediction = predict_next_mark(self._rounds, fake_next_round, self.gap, self._rows, self._columns)
        log.debug("%s: %s next -> %s", self.name, outcome.name, prediction)
        return prediction

    @property
    def banker_prediction(self) -> Optional[bool]:
        return self.predict(Outcome.BANKER_WIN)

    @property
    def player_prediction(self) -> Optional[bool]:
        return self.predict(Outcome.PLAYER_WIN)


class BigEyeRoad(DerivedRoad):
    gap = Gap.BIG_EYE
    name = "big_eye"


class SmallRoad(DerivedRoad):
    gap = Gap.SMALL
    name = "small"


class CockroachRoad(DerivedRoad):
    gap = Gap.COCKROACH
    name = "cockroach"


DERIVED_ROADS = {cls.name: cls for cls in (BigEyeRoad, SmallRoad, CockroachRoad)}
