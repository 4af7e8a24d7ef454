"""
Derived roads (big eye boy / small road / cockroach pig).

All three are the same walk over the big road, differing only in how many
columns they look back (`Gap`). Each big road cell from the starting position on
produces one mark:

- red  (repeats=True)  the pattern `gap` columns back is repeated
- blue (repeats=False) the pattern is broken
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
import logging
from typing import Any, List, NamedTuple, Optional, Sequence

from baccarat_roads.roads.grid import Road

log = logging.getLogger(__name__)


class Gap(IntEnum):
    BIG_EYE = 1
    SMALL = 2
    COCKROACH = 3


@dataclass(frozen=True)
class DerivedMark:
    order: int     # order of the big road cell that produced the mark
    repeats: bool  # True = red, False = blue

    @property
    def colour(self) -> str:
        return "red" if self.repeats else "blue"


class _Indexed(NamedTuple):
    row: int
    column: int
    order: int


def _cell(grid: Sequence[Sequence[Any]], row: int, column: int) -> Optional[Any]:
    # negative indexes must read as absent, not wrap around
    if row < 0 or column < 0 or row >= len(grid) or column >= len(grid[row]):
        return None
    return grid[row][column]


def _length(lengths: List[int], column: int) -> Optional[int]:
    if column < 0 or column >= len(lengths):
        return None
    return lengths[column]


def generate_derived_road(grid, gap: int) -> List[DerivedMark]:
    """
    Marks for one derived road, ascending by order.

    `grid` is a big road: either a `Road` or its raw rows, cells exposing `.order`.
    Returns [] until the big road reaches cell (1, gap) or, failing that, (0, gap + 1).
    """
    gap = Gap(gap)
    if isinstance(grid, Road):
        grid = grid.raw_array

    max_columns = max((len(row) for row in grid), default=0)
    marks: List[DerivedMark] = []

    start = _cell(grid, 1, gap)
    if start is None:
        start = _cell(grid, 0, gap + 1)
    if start is None:
        return marks
    begin_order = start.order

    indexed: List[_Indexed] = []
    lengths: List[int] = []
    for column in range(max_columns):
        length = 0
        for row in range(len(grid)):
            item = _cell(grid, row, column)
            if item is not None:
                length += 1
                indexed.append(_Indexed(row, column, item.order))
        lengths.append(length)

    # grid position stops being chronological once a streak tails to the right
    indexed.sort(key=lambda x: x.order)
    for item in indexed:
        if item.order < begin_order:
            continue
        if item.row == 0:
            repeats = _length(lengths, item.column - gap - 1) == _length(lengths, item.column - gap)
        else:
            above = _cell(grid, item.row - 1, item.column - gap)
            beside = _cell(grid, item.row, item.column - gap)
            repeats = above is None or beside is not None
        marks.append(DerivedMark(item.order, repeats))

    log.debug("derived road gap=%d: begin order %s, %d marks", gap, begin_order, len(marks))
    return marks
