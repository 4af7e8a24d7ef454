import pytest

from baccarat_roads.core.round import Round
from baccarat_roads.core.validation import parse_outcomes


def rounds_from(text: str, start: int = 0):
    return [Round(start + i, 0, o) for i, o in enumerate(parse_outcomes(text))]


@pytest.fixture
def make_rounds():
    return rounds_from
