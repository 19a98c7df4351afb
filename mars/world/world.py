"""
World - Shared state of one simulation run.

The World is the only state that outlives a single robot. It:
- Owns the grid bounds
- Owns the scent set (off-grid squares where a robot was lost)
- Places robots, validating their start squares
- Resolves forward moves, applying the scent rule

Robots must be run against the World strictly in input order: scents
written while running one robot change the behaviour of every later one.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Set

from .grid import Grid
from ..core.errors import ConstructionError
from ..core.types import Coordinate, Orientation, StepResult
from ..entities.robot import Robot
from infra.logger import get_logger

log = get_logger(__name__)


class World:
    """
    Grid plus scent markers.

    Invariant: every coordinate in the scent set lies off the grid.
    Scents are only ever added, never removed.
    """

    def __init__(self, max_x: int, max_y: int):
        """
        Initialize an empty world.

        Args:
            max_x: Largest valid x coordinate
            max_y: Largest valid y coordinate

        Raises:
            ConstructionError: If either bound exceeds the grid limit
        """
        self.grid = Grid(max_x, max_y)
        self._scents: Set[Coordinate] = set()

    # ========================================================================
    # ROBOT PLACEMENT
    # ========================================================================

    def place_robot(self, x: int, y: int, orientation: Orientation) -> Robot:
        """
        Create a robot on this world.

        Only the upper bounds are checked; negative starts are accepted.

        Raises:
            ConstructionError: If x > max_x or y > max_y
        """
        if x > self.grid.max_x or y > self.grid.max_y:
            raise ConstructionError(f"Invalid start point for robot {x} {y}")
        return Robot(position=(x, y), orientation=orientation)

    # ========================================================================
    # STEPPING RULE
    # ========================================================================

    def apply_forward(self, robot: Robot) -> StepResult:
        """
        Move a robot one square along its heading.

        1. A target square carrying a scent is ignored: the robot stays put.
        2. A target square off the grid loses the robot. The target is
           recorded as a scent and the robot keeps its last valid pose.
        3. Otherwise the robot advances.

        Args:
            robot: Robot to move (modified in-place)

        Returns:
            StepResult describing which branch applied
        """
        dx, dy = robot.orientation.delta
        candidate = (robot.position[0] + dx, robot.position[1] + dy)

        if candidate in self._scents:
            log.debug("Robot at %s facing %s ignores move to scented %s", robot.position, robot.orientation, candidate)
            return StepResult.BLOCKED_BY_SCENT

        if not self.grid.in_bounds(candidate):
            self._scents.add(candidate)
            log.info("Robot at %s facing %s lost moving to %s; scent left", robot.position, robot.orientation, candidate)
            return StepResult.LOST

        robot.position = candidate
        log.debug("Robot moved to %s", candidate)
        return StepResult.MOVED

    # ========================================================================
    # SCENT QUERIES
    # ========================================================================

    def has_scent(self, pos: Coordinate) -> bool:
        """Check whether a robot has been lost moving onto ``pos``."""
        return pos in self._scents

    @property
    def scents(self) -> FrozenSet[Coordinate]:
        """Read-only snapshot of the scent set."""
        return frozenset(self._scents)

    # ========================================================================
    # UTILITY
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize world state to a dictionary.

        Scents are sorted so the output is stable.
        """
        return {
            "grid": {
                "max_x": self.grid.max_x,
                "max_y": self.grid.max_y,
            },
            "scents": [list(pos) for pos in sorted(self._scents)],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> World:
        """
        Deserialize world state from a dictionary.

        Raises:
            ConstructionError: If the grid is too large or a scent lies on the grid
        """
        world = cls(
            max_x=data["grid"]["max_x"],
            max_y=data["grid"]["max_y"],
        )
        for x, y in data.get("scents", []):
            pos = (int(x), int(y))
            if world.grid.in_bounds(pos):
                raise ConstructionError(f"Scent {pos} lies on the grid")
            world._scents.add(pos)
        return world

    def __str__(self) -> str:
        return f"World({self.grid}, scents={len(self._scents)})"
