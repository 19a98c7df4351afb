"""
Simulator - Runs every robot of a scenario against one shared World.

Usage:
    from mars import Scenario, Simulator

    scenario = Scenario.parse(text)
    outcomes = Simulator().run(scenario)
    for outcome in outcomes:
        print(outcome)

Robots run strictly one after another in input order. A robot lost at the
edge leaves a scent that changes what later robots do, so the order is
part of the result.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .core.types import Command, Outcome, StepResult
from .entities.robot import Robot
from .scenario import Scenario, parse_scenario
from .world import World
from infra.logger import get_logger

log = get_logger(__name__)


class Simulator:
    """
    Orchestrates one full run per robot and collects Outcomes.

    The simulator raises nothing of its own; every failure happens while
    parsing or building the scenario, before the first robot moves.

    Attributes:
        world: World of the most recent run (None before the first run)
    """

    def __init__(self):
        self.world: Optional[World] = None

    def run(self, scenario: Scenario) -> List[Outcome]:
        """
        Build the scenario and run all robots in order.

        Args:
            scenario: Parsed scenario

        Returns:
            One Outcome per robot, in input order

        Raises:
            ConstructionError: If the grid or any robot start is invalid
        """
        world, robots = scenario.build()
        self.world = world
        log.info("Running %d robot(s) on %s", len(robots), world.grid)

        outcomes = [
            self.run_robot(world, robot, commands, number=number)
            for number, (robot, commands) in enumerate(robots, start=1)
        ]

        lost = sum(1 for outcome in outcomes if outcome.lost)
        log.info("Run complete: %d robot(s), %d lost, %d scent(s)", len(outcomes), lost, len(world.scents))
        return outcomes

    def run_robot(
        self, world: World, robot: Robot, commands: Sequence[Command], number: int = 1
    ) -> Outcome:
        """
        Execute a robot's commands until they run out or it is lost.

        Args:
            world: Shared world (scents may be added)
            robot: Robot to drive (modified in-place)
            commands: Commands in execution order
            number: 1-based input position, used in log messages

        Returns:
            Outcome with the last valid pose and the lost flag
        """
        log.debug(
            "Robot %d starting at %s facing %s with %d command(s)",
            number, robot.position, robot.orientation, len(commands),
        )

        for command in commands:
            if command is Command.LEFT:
                robot.turn_left()
            elif command is Command.RIGHT:
                robot.turn_right()
            elif world.apply_forward(robot) is StepResult.LOST:
                outcome = robot.outcome(lost=True)
                log.info("Robot %d finished: %s", number, outcome)
                return outcome

        outcome = robot.outcome()
        log.info("Robot %d finished: %s", number, outcome)
        return outcome


def run_input(text: str) -> List[str]:
    """
    Parse, simulate and format a scenario in one go.

    Nothing is returned unless the whole run succeeds.

    Raises:
        ParseError: If the text is malformed
        ConstructionError: If the grid or a robot start is invalid
    """
    scenario = parse_scenario(text)
    return [str(outcome) for outcome in Simulator().run(scenario)]
