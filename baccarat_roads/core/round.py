from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    TIE = "T"
    BANKER_WIN = "B"
    PLAYER_WIN = "P"


class PairFlag(Enum):
    NO_PAIR = "none"
    BANKER_PAIR = "banker"
    PLAYER_PAIR = "player"
    ALL_PAIR = "all"


@dataclass(frozen=True)
class Round:
    """One resolved round. `order` keeps chronology once the big road wraps."""
    order: int
    result: float
    outcome: Outcome
    pair: PairFlag = PairFlag.NO_PAIR

    def copy(self) -> Round:
        """New instance with the same fields (never the same object)."""
        return Round(self.order, self.result, self.outcome, self.pair)

    @property
    def is_tie(self) -> bool:
        return self.outcome is Outcome.TIE
