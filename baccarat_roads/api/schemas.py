from pydantic import BaseModel, Field
from typing import Optional

from baccarat_roads.core.round import Outcome, PairFlag


class RoundIn(BaseModel):
    outcome: Outcome
    result: float = 0
    pair: PairFlag = PairFlag.NO_PAIR


class RoundOut(BaseModel):
    order: int
    result: float
    outcome: Outcome
    pair: PairFlag


class PredictionsOut(BaseModel):
    banker: dict[str, Optional[str]]
    player: dict[str, Optional[str]]


class RoadsOut(BaseModel):
    rows: int = Field(gt=0)
    columns: int = Field(gt=0)
    counts: dict[str, int]
    big_road: list[int]
    derived: dict[str, list[str]]
    predictions: PredictionsOut
