from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import List, Optional, Sequence

from baccarat_roads.core.round import Outcome, PairFlag, Round
from baccarat_roads.roads.grid import Road, place_streaks

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BigRoadCell:
    order: int
    outcome: Outcome
    pair: PairFlag = PairFlag.NO_PAIR
    ties: int = 0  # ties drawn after this round (green slash)


def build_big_road(rounds: Sequence[Round], rows: int) -> List[List[Optional[BigRoadCell]]]:
    """Big road grid for `rounds`. Ties take no cell; they are counted on the latest cell."""
    cells: List[BigRoadCell] = []
    ties: List[int] = []
    leading_ties = 0
    for r in rounds:
        if r.is_tie:
            if ties:
                ties[-1] += 1
            else:
                leading_ties += 1
            continue
        cells.append(BigRoadCell(r.order, r.outcome, r.pair))
        ties.append(0)
    if ties:
        ties[0] += leading_ties

    cells = [
        BigRoadCell(cell.order, cell.outcome, cell.pair, n) if n else cell
        for cell, n in zip(cells, ties)
    ]
    grid = place_streaks(cells, lambda a, b: a.outcome is b.outcome, rows)
    log.debug("big road: %d rounds -> %d cells, width %d", len(rounds), len(cells), len(grid[0]) if grid else 0)
    return grid


class BigRoad(Road[BigRoadCell]):

    def __init__(self, rows: int, columns: int, rounds: Sequence[Round]):
        super().__init__(rows, columns, rounds)
        self._array = build_big_road(self._rounds, rows)

    def column_lengths(self) -> List[int]:
        """Occupied cells per grid column (a dragon tail counts in the columns it spills into)."""
        return [
            sum(1 for row in self._array if row[col] is not None)
            for col in range(self.width)
        ]
