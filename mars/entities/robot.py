"""
Robot entity - the mutable pose driven by a command list.

Robots:
- Are placed on the world by World.place_robot (which validates the start)
- Rotate on their own (LEFT / RIGHT)
- Delegate forward moves to the world, which owns bounds and scents
- Are discarded once their Outcome is produced
"""

from __future__ import annotations
from dataclasses import dataclass

from ..core.types import Coordinate, Orientation, Outcome


@dataclass
class Robot:
    """
    A robot exploring the grid.

    Attributes:
        position: Current (x, y) square
        orientation: Current heading
    """

    position: Coordinate
    orientation: Orientation

    def turn_left(self) -> None:
        """Rotate 90 degrees counter-clockwise in place."""
        self.orientation = self.orientation.left()

    def turn_right(self) -> None:
        """Rotate 90 degrees clockwise in place."""
        self.orientation = self.orientation.right()

    def outcome(self, lost: bool = False) -> Outcome:
        """Freeze the current pose into an Outcome."""
        return Outcome(position=self.position, orientation=self.orientation, lost=lost)
