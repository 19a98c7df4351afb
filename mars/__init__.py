"""
Mars robot simulation.

Robots move on a bounded grid following F/L/R commands. A robot that
drives off the edge is lost and leaves a scent that protects later robots
from repeating the same move.

Usage:
    from mars import Scenario, Simulator

    outcomes = Simulator().run(Scenario.load("input.txt"))
"""

from .core import (
    Command,
    ConstructionError,
    MarsError,
    Orientation,
    Outcome,
    ParseError,
    ScenarioIOError,
    StepResult,
)
from .entities import Robot
from .scenario import RobotSpec, Scenario, parse_scenario
from .simulator import Simulator, run_input
from .world import Grid, World

__all__ = [
    "Command",
    "ConstructionError",
    "MarsError",
    "Orientation",
    "Outcome",
    "ParseError",
    "ScenarioIOError",
    "StepResult",
    "Robot",
    "RobotSpec",
    "Scenario",
    "parse_scenario",
    "Simulator",
    "run_input",
    "Grid",
    "World",
]
