from __future__ import annotations
from typing import Callable, Dict, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from baccarat_roads.core.round import Round
from baccarat_roads.core.validation import is_positive_int

T = TypeVar("T")


class InvalidGridDimensions(ValueError):
    pass


def place_streaks(items: Iterable[T], same_streak: Callable[[T, T], bool], rows: int) -> List[List[Optional[T]]]:
    """
    Lay items out the way a road paper is drawn:
    - same streak -> next row down in the current column
    - new streak  -> row 0 of the first free column right of the previous streak's start
    - bottom row reached / cell below taken -> turn right along the row (dragon tail)
    Returns `rows` lists padded with None to a common width.
    """
    grid: Dict[Tuple[int, int], T] = {}
    r, c = 0, 0
    vert_col = 0
    tailing = False
    prev: Optional[T] = None
    for item in items:
        if prev is None:
            pass  # first item goes to (0, 0)
        elif same_streak(prev, item):
            if not tailing and r + 1 < rows and (r + 1, c) not in grid:
                r += 1
            else:
                tailing = True
                c += 1
                while (r, c) in grid:
                    c += 1
        else:
            tailing = False
            r = 0
            c = vert_col + 1
            while (r, c) in grid:
                c += 1
            vert_col = c
        grid[(r, c)] = item
        prev = item

    width = max((col for _, col in grid), default=-1) + 1
    out: List[List[Optional[T]]] = [[None] * width for _ in range(rows)]
    for (row, col), item in grid.items():
        out[row][col] = item
    return out


class Road(Generic[T]):
    """
    Fixed-row grid whose columns grow with the history.
    Subclasses fill `_array`; the base only validates and answers lookups.
    """

    def __init__(self, rows: int, columns: int, rounds: Sequence[Round]):
        if not is_positive_int(rows) or not is_positive_int(columns):
            raise InvalidGridDimensions(f"Row/Column must be positive integer, got rows={rows!r} columns={columns!r}")
        self._rows = rows
        self._columns = columns
        self._rounds: Tuple[Round, ...] = tuple(rounds)
        self._array: List[List[Optional[T]]] = [[] for _ in range(rows)]

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def column_count(self) -> int:
        return self._columns

    @property
    def rounds(self) -> Tuple[Round, ...]:
        return self._rounds

    @property
    def raw_array(self) -> Tuple[Tuple[Optional[T], ...], ...]:
        return tuple(tuple(row) for row in self._array)

    @property
    def width(self) -> int:
        """Columns actually used; may exceed column_count on a long shoe."""
        return max((len(row) for row in self._array), default=0)

    def get_item(self, row: int, column: int) -> Optional[T]:
        if row < 0 or column < 0 or row >= len(self._array):
            return None
        line = self._array[row]
        if column >= len(line):
            return None
        return line[column]
