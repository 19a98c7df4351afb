"""
Core types, constants and errors for the Mars robot simulation.
"""

# Instead of from mars.core.types import Orientation, you can do: from mars.core import Orientation
from .errors import (
    MarsError,
    ScenarioIOError,
    ParseError,
    ConstructionError,
)
from .types import (
    Coordinate,
    MAX_COORDINATE,
    Orientation,
    Command,
    StepResult,
    Outcome,
)


__all__ = [
    "MarsError",
    "ScenarioIOError",
    "ParseError",
    "ConstructionError",
    "Coordinate",
    "MAX_COORDINATE",
    "Orientation",
    "Command",
    "StepResult",
    "Outcome",
]
