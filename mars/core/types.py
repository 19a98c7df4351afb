"""
Core type definitions for the Mars robot simulation.

This module contains the fundamental types, enums, and constants used
throughout the system. Nothing here touches the world or the parser.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Tuple

from .errors import ParseError

# ============================================================================
# SPATIAL TYPES
# ============================================================================

# Grid coordinate: (x, y) where:
# - X increases to the RIGHT (East)
# - Y increases UPWARD (North)
# - Origin (0, 0) is the SOUTH-WEST corner
Coordinate = Tuple[int, int]

# Largest accepted value for either grid bound.
MAX_COORDINATE = 50


class Orientation(Enum):
    """
    Compass heading of a robot.

    The value is the single letter used in the input and output formats.
    Rotations are cyclic: N -> E -> S -> W -> N when turning right.
    """
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def delta(self) -> Tuple[int, int]:
        """Get the (dx, dy) unit step of a forward move."""
        return _DELTAS[self]

    def left(self) -> Orientation:
        """Heading after a 90 degree counter-clockwise turn."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def right(self) -> Orientation:
        """Heading after a 90 degree clockwise turn."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    @classmethod
    def parse(cls, token: str) -> Orientation:
        """
        Parse a heading letter.

        Raises:
            ParseError: If the token is not exactly one of N, E, S, W
        """
        try:
            return cls(token)
        except ValueError:
            raise ParseError(f"not a valid orientation: '{token}'") from None

    def __str__(self) -> str:
        return self.value


_CLOCKWISE = (Orientation.NORTH, Orientation.EAST, Orientation.SOUTH, Orientation.WEST)

_DELTAS = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}


# ============================================================================
# COMMANDS
# ============================================================================

class Command(Enum):
    """Instructions a robot can execute."""
    FORWARD = "F"  # Move one square in the current heading
    LEFT = "L"  # Rotate 90 degrees left, stay in place
    RIGHT = "R"  # Rotate 90 degrees right, stay in place

    @classmethod
    def parse(cls, char: str) -> Command:
        """
        Parse a single command character.

        Raises:
            ParseError: If the character is not F, L or R
        """
        try:
            return cls(char)
        except ValueError:
            raise ParseError(f"not a valid command: '{char}'") from None

    def __str__(self) -> str:
        return self.value


class StepResult(Enum):
    """What happened when a robot tried to move forward."""
    MOVED = auto()  # Robot advanced one square
    BLOCKED_BY_SCENT = auto()  # Scent on the target square, move ignored
    LOST = auto()  # Robot left the grid and is lost

    def __str__(self) -> str:
        return self.name


# ============================================================================
# OUTCOME
# ============================================================================

@dataclass(frozen=True)
class Outcome:
    """
    Final result of running one robot.

    Attributes:
        position: Last valid position of the robot
        orientation: Last heading of the robot
        lost: Whether the robot fell off the grid
    """
    position: Coordinate
    orientation: Orientation
    lost: bool = False

    def __str__(self) -> str:
        """Render in the output format, e.g. ``3 3 N LOST``."""
        x, y = self.position
        line = f"{x} {y} {self.orientation}"
        if self.lost:
            line += " LOST"
        return line

    def to_dict(self) -> Dict[str, Any]:
        """Serialize outcome to a plain dict."""
        return {
            "x": self.position[0],
            "y": self.position[1],
            "orientation": self.orientation.value,
            "lost": self.lost,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Outcome:
        """Deserialize an outcome from a dict produced by to_dict()."""
        return cls(
            position=(int(data["x"]), int(data["y"])),
            orientation=Orientation(data["orientation"]),
            lost=bool(data.get("lost", False)),
        )
