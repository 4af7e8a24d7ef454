from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional

from baccarat_roads.config import settings
from baccarat_roads.core.round import Outcome, PairFlag, Round
from baccarat_roads.roads.big_road import BigRoad
from baccarat_roads.roads.grid import InvalidGridDimensions
from baccarat_roads.roads.prediction import DERIVED_ROADS, DerivedRoad, next_order
from baccarat_roads.core.validation import is_positive_int

log = logging.getLogger(__name__)


def _mark_label(repeats: Optional[bool]) -> Optional[str]:
    if repeats is None:
        return None
    return "red" if repeats else "blue"


class RoadSession:
    """Append-only round history of one shoe, with its roads rebuilt on demand."""

    def __init__(self, rows: int | None = None, columns: int | None = None):
        self.rows = settings.rows if rows is None else rows
        self.columns = settings.columns if columns is None else columns
        if not is_positive_int(self.rows) or not is_positive_int(self.columns):
            raise InvalidGridDimensions(
                f"Row/Column must be positive integer, got rows={self.rows!r} columns={self.columns!r}")
        self._rounds: List[Round] = []

    # ---------------- history ----------------
    @property
    def rounds(self) -> tuple[Round, ...]:
        return tuple(self._rounds)

    def append(self, outcome: Outcome, result: float = 0, pair: PairFlag = PairFlag.NO_PAIR) -> Round:
        r = Round(next_order(self._rounds), result, outcome, pair)
        self._rounds.append(r)
        log.info("round %d: %s", r.order, outcome.name, extra={"order": r.order, "outcome": outcome.value})
        return r

    def extend(self, outcomes: Iterable[Outcome]) -> List[Round]:
        return [self.append(o) for o in outcomes]

    def undo(self) -> Round | None:
        if not self._rounds:
            return None
        r = self._rounds.pop()
        log.info("undo round %d", r.order, extra={"order": r.order})
        return r

    def reset(self):
        self._rounds.clear()
        log.info("session reset")

    # ---------------- roads ----------------
    @property
    def big_road(self) -> BigRoad:
        return BigRoad(self.rows, self.columns, self._rounds)

    @property
    def derived_roads(self) -> Dict[str, DerivedRoad]:
        return {name: cls(self.rows, self.columns, self._rounds) for name, cls in DERIVED_ROADS.items()}

    def predictions(self) -> Dict[str, Dict[str, Optional[bool]]]:
        roads = self.derived_roads
        return {
            "banker": {name: road.banker_prediction for name, road in roads.items()},
            "player": {name: road.player_prediction for name, road in roads.items()},
        }

    def counts(self) -> Dict[str, int]:
        out = {o.name.lower(): 0 for o in Outcome}
        for r in self._rounds:
            out[r.outcome.name.lower()] += 1
        out["total"] = len(self._rounds)
        return out

    def snapshot(self) -> Dict:
        roads = self.derived_roads
        return {
            "rows": self.rows,
            "columns": self.columns,
            "counts": self.counts(),
            "big_road": self.big_road.column_lengths(),
            "derived": {
                name: [m.colour for m in road.marks]
                for name, road in roads.items()
            },
            "predictions": {
                side: {name: _mark_label(v) for name, v in per_road.items()}
                for side, per_road in self.predictions().items()
            },
        }
