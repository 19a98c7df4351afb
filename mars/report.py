"""JSON report models for a finished run."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from pydantic import BaseModel

from .core.types import Outcome
from .world import World


class OutcomeModel(BaseModel):
    x: int
    y: int
    orientation: str
    lost: bool = False

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> "OutcomeModel":
        return cls(**outcome.to_dict())

    def to_outcome(self) -> Outcome:
        return Outcome.from_dict(self.model_dump())


class GridModel(BaseModel):
    max_x: int
    max_y: int


class RunReport(BaseModel):
    grid: GridModel
    outcomes: List[OutcomeModel]
    scents: List[Tuple[int, int]] = []

    @classmethod
    def from_run(cls, world: World, outcomes: Sequence[Outcome]) -> "RunReport":
        data = world.to_dict()
        return cls(
            grid=GridModel(**data["grid"]),
            outcomes=[OutcomeModel.from_outcome(outcome) for outcome in outcomes],
            scents=[tuple(pos) for pos in data["scents"]],
        )

    def lines(self) -> List[str]:
        """Outcomes in the plain text output format."""
        return [str(model.to_outcome()) for model in self.outcomes]
