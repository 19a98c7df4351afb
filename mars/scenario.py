"""
Scenario - Parsed description of one simulation run.

A scenario is the grid size plus an ordered list of robots, each with a
start pose and a command list. It carries no simulation state; call
``Scenario.build()`` to obtain a fresh World and placed robots.

Input format:
    5 3          <- max x, max y (inclusive)
    1 1 E        <- robot start: x y heading
    RFRFRFRF     <- robot commands
                 <- blank lines between robots are ignored
    3 2 N
    FRRFLLFFRRFLL
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .core.errors import ParseError, ScenarioIOError
from .core.types import Command, Orientation
from .entities.robot import Robot
from .world import World
from infra.logger import get_logger

log = get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# (line number, line text), numbered from 1
NumberedLines = Iterator[Tuple[int, str]]


@dataclass
class RobotSpec:
    """
    Start pose and commands of one robot, as written in the input.

    Attributes:
        x: Start x coordinate
        y: Start y coordinate
        orientation: Start heading
        commands: Commands to execute in order
    """
    x: int
    y: int
    orientation: Orientation
    commands: List[Command] = field(default_factory=list)

    @property
    def command_string(self) -> str:
        return "".join(str(command) for command in self.commands)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "orientation": self.orientation.value,
            "commands": self.command_string,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RobotSpec:
        return cls(
            x=int(data["x"]),
            y=int(data["y"]),
            orientation=Orientation.parse(data["orientation"]),
            commands=[Command.parse(char) for char in data.get("commands", "")],
        )


@dataclass
class Scenario:
    """
    Grid size plus robots in input order.

    Attributes:
        max_x: Largest valid x coordinate
        max_y: Largest valid y coordinate
        robots: Robot specs, in the order they must be simulated
    """
    max_x: int
    max_y: int
    robots: List[RobotSpec] = field(default_factory=list)

    @property
    def grid_size(self) -> Tuple[int, int]:
        return self.max_x, self.max_y

    def add_robot(self, robot: RobotSpec) -> None:
        self.robots.append(robot)

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    def build(self) -> Tuple[World, List[Tuple[Robot, List[Command]]]]:
        """
        Create the World and place every robot on it.

        All robots are placed before any of them runs, so an invalid start
        anywhere in the scenario aborts the run before the first move.

        Returns:
            (world, [(robot, commands), ...]) in input order

        Raises:
            ConstructionError: If the grid is too large or a start is off the grid
        """
        world = World(self.max_x, self.max_y)
        robots = [
            (world.place_robot(spec.x, spec.y, spec.orientation), list(spec.commands))
            for spec in self.robots
        ]
        return world, robots

    # ========================================================================
    # PARSING / LOADING
    # ========================================================================

    @classmethod
    def parse(cls, text: str) -> Scenario:
        """Parse scenario text. See parse_scenario()."""
        return parse_scenario(text)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Scenario:
        """
        Read and parse a scenario file.

        Raises:
            ScenarioIOError: If the file cannot be read
            ParseError: If its contents are malformed
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ScenarioIOError(f"cannot read input file {path}: {exc}") from exc
        log.debug("Read %d bytes from %s", len(text), path)
        return parse_scenario(text)

    # ========================================================================
    # SERIALIZATION
    # ========================================================================

    def to_text(self) -> str:
        """Render back to the input text format."""
        blocks = [f"{self.max_x} {self.max_y}"]
        for spec in self.robots:
            blocks.append(f"{spec.x} {spec.y} {spec.orientation}\n{spec.command_string}")
        return "\n\n".join(blocks) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": {"max_x": self.max_x, "max_y": self.max_y},
            "robots": [spec.to_dict() for spec in self.robots],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Scenario:
        return cls(
            max_x=int(data["grid"]["max_x"]),
            max_y=int(data["grid"]["max_y"]),
            robots=[RobotSpec.from_dict(item) for item in data.get("robots", [])],
        )

    def __str__(self) -> str:
        return f"Scenario({self.max_x}x{self.max_y}, robots={len(self.robots)})"


# ============================================================================
# PARSER
# ============================================================================

def parse_scenario(text: str) -> Scenario:
    """
    Parse scenario text into a Scenario.

    Only syntax is checked here. Grid limits and robot start squares are
    validated by Scenario.build().

    Raises:
        ParseError: On any malformed line, naming the line and token
    """
    lines: NumberedLines = enumerate(_split_lines(text), start=1)

    grid_line = _next_non_blank(lines)
    if grid_line is None:
        raise ParseError("no grid found")
    line_number, grid_text = grid_line

    tokens = grid_text.split()
    if len(tokens) != 2:
        raise ParseError(f"could not parse world size: {grid_text!r}", line_number)
    max_x = _parse_int(tokens[0], "grid max x", line_number)
    max_y = _parse_int(tokens[1], "grid max y", line_number)

    scenario = Scenario(max_x=max_x, max_y=max_y)
    while True:
        spec = _parse_robot(lines)
        if spec is None:
            break
        scenario.add_robot(spec)

    log.debug("Parsed %s", scenario)
    return scenario


def _split_lines(text: str) -> List[str]:
    """Split on LF and CRLF only; a trailing newline does not open an empty line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _next_non_blank(lines: NumberedLines) -> Optional[Tuple[int, str]]:
    """Advance past blank lines; None when the input is exhausted."""
    for line_number, line in lines:
        if line.strip():
            return line_number, line
    return None


def _parse_robot(lines: NumberedLines) -> Optional[RobotSpec]:
    """Consume one robot block, or return None at end of input."""
    start = _next_non_blank(lines)
    if start is None:
        return None
    line_number, start_text = start

    tokens = start_text.split()
    if len(tokens) != 3:
        raise ParseError(f"could not parse robot start pos: {start_text!r}", line_number)
    x = _parse_int(tokens[0], "robot x", line_number)
    y = _parse_int(tokens[1], "robot y", line_number)
    try:
        orientation = Orientation.parse(tokens[2])
    except ParseError as exc:
        raise exc.at_line(line_number) from None

    command_line = next(lines, None)
    if command_line is None:
        raise ParseError(f"no commands found for robot at {x} {y}", line_number)
    command_number, command_text = command_line

    commands = []
    for char in command_text:
        try:
            commands.append(Command.parse(char))
        except ParseError as exc:
            raise exc.at_line(command_number) from None

    return RobotSpec(x=x, y=y, orientation=orientation, commands=commands)


def _parse_int(token: str, what: str, line_number: int) -> int:
    if not _INTEGER.fullmatch(token):
        raise ParseError(f"{what} is not an integer: '{token}'", line_number)
    return int(token)
