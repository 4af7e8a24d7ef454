from types import SimpleNamespace

import pytest

from baccarat_roads.roads.big_road import BigRoad
from baccarat_roads.roads.derived import DerivedMark, Gap, generate_derived_road

HISTORY = "PPBTBBBTBPPTTBBPBPPBPPBBPPTPPBBBPT"  # a real shoe, ties included


def _grid(columns, rows=6):
    """Raw rows from a list of column order lists."""
    width = len(columns)
    out = [[None] * width for _ in range(rows)]
    for c, orders in enumerate(columns):
        for r, order in enumerate(orders):
            out[r][c] = SimpleNamespace(order=order)
    return out


@pytest.mark.parametrize("gap", list(Gap))
def test_empty_grid(gap):
    assert generate_derived_road([], gap) == []
    assert generate_derived_road([[] for _ in range(6)], gap) == []


@pytest.mark.parametrize("gap", list(Gap))
def test_too_few_columns(gap, make_rounds):
    # gap columns, each one deep: neither (1, gap) nor (0, gap + 1) exists
    road = BigRoad(6, 30, make_rounds("BP" * gap)[:gap])
    assert generate_derived_road(road, gap) == []


def test_gap_must_be_enumerated():
    with pytest.raises(ValueError):
        generate_derived_road(_grid([[1, 2], [3], [4]]), 4)
    with pytest.raises(ValueError):
        generate_derived_road(_grid([[1, 2], [3], [4]]), 0)


def test_hand_traced_big_eye():
    # column lengths 4, 3, 2 with tops 1, 5, 8
    grid = _grid([[1, 2, 3, 4], [5, 6, 7], [8, 9]])
    marks = generate_derived_road(grid, Gap.BIG_EYE)
    # begins at (1, 1) -> order 6
    assert marks == [
        DerivedMark(6, True),   # (0,0) and (1,0) both present
        DerivedMark(7, True),   # (1,0) and (2,0) both present
        DerivedMark(8, False),  # new column: length 4 != 3
        DerivedMark(9, True),   # (0,1) and (1,1) both present
    ]


def test_hand_traced_same_grid_wider_gaps():
    grid = _grid([[1, 2, 3, 4], [5, 6, 7], [8, 9]])
    assert generate_derived_road(grid, Gap.SMALL) == [DerivedMark(9, True)]
    assert generate_derived_road(grid, Gap.COCKROACH) == []


def test_begin_falls_back_to_top_of_next_column(make_rounds):
    marks = generate_derived_road(BigRoad(6, 30, make_rounds("BPBPB")), Gap.SMALL)
    assert marks == [DerivedMark(3, True), DerivedMark(4, True)]


def test_new_column_compares_lengths_gap_and_gap_plus_one_back(make_rounds):
    # lengths 1, 2, 1, 1; the top of column 3 compares columns 0 and 1
    marks = generate_derived_road(BigRoad(6, 30, make_rounds("BPPBP")), Gap.SMALL)
    assert marks == [DerivedMark(4, False)]


def test_continuing_streak_breaks_when_reference_column_ends(make_rounds):
    marks = generate_derived_road(BigRoad(6, 30, make_rounds("BPPP")), Gap.BIG_EYE)
    assert marks == [DerivedMark(2, False), DerivedMark(3, True)]
    marks = generate_derived_road(BigRoad(6, 30, make_rounds("BBPP")), Gap.BIG_EYE)
    assert marks == [DerivedMark(3, True)]


def test_dragon_tail_is_read_in_order(make_rounds):
    # rows=2: B B B tails to (1,1), P lands on (0,1) after it
    road = BigRoad(2, 30, make_rounds("BBBP"))
    assert road.get_item(1, 1).order == 2 and road.get_item(0, 1).order == 3
    assert generate_derived_road(road, Gap.BIG_EYE) == [DerivedMark(2, True), DerivedMark(3, False)]


def test_accepts_road_or_raw_rows(make_rounds):
    road = BigRoad(6, 30, make_rounds(HISTORY))
    assert generate_derived_road(road, 1) == generate_derived_road(road.raw_array, Gap.BIG_EYE)


@pytest.mark.parametrize("gap", list(Gap))
def test_marks_grow_and_stay_ordered(gap, make_rounds):
    rounds = make_rounds(HISTORY)
    previous = []
    for n in range(len(rounds) + 1):
        road = BigRoad(6, 30, rounds[:n])
        marks = generate_derived_road(road, gap)
        orders = [m.order for m in marks]
        cell_orders = {c.order for row in road.raw_array for c in row if c is not None}
        assert orders == sorted(set(orders))
        assert set(orders) <= cell_orders
        assert len(marks) <= n
        # marks already drawn are never redrawn
        assert marks[:len(previous)] == previous
        previous = marks
    assert previous


def test_mark_colour():
    assert DerivedMark(1, True).colour == "red"
    assert DerivedMark(1, False).colour == "blue"
