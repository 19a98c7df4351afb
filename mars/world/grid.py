"""
Grid - Bounds logic for the surface of Mars.

Coordinate System:
- X increases to the RIGHT (East)
- Y increases UPWARD (North)
- Origin (0, 0) is at BOTTOM-LEFT
- Both bounds are inclusive: a grid of ``5 3`` has x in [0, 5], y in [0, 3]
"""

from __future__ import annotations

from ..core.errors import ConstructionError
from ..core.types import Coordinate, MAX_COORDINATE


class Grid:
    """
    A rectangular grid described by its upper-right corner.

    Provides bounds queries without any robot or scent state.

    Attributes:
        max_x: Largest valid x coordinate
        max_y: Largest valid y coordinate
    """

    def __init__(self, max_x: int, max_y: int):
        """
        Initialize a grid.

        Only the upper limit is enforced. Zero or negative bounds are
        accepted as-is; a negative bound simply yields a grid with no
        valid squares on that axis.

        Args:
            max_x: Largest valid x coordinate (at most MAX_COORDINATE)
            max_y: Largest valid y coordinate (at most MAX_COORDINATE)

        Raises:
            ConstructionError: If either bound exceeds MAX_COORDINATE
        """
        if max_x > MAX_COORDINATE or max_y > MAX_COORDINATE:
            raise ConstructionError(
                f"Bad dimensions: {max_x} {max_y} (each must be at most {MAX_COORDINATE})"
            )

        self.max_x = max_x
        self.max_y = max_y

    def in_bounds(self, pos: Coordinate) -> bool:
        """
        Check if a position lies on the grid.

        Args:
            pos: Position to check (x, y)

        Returns:
            True if 0 <= x <= max_x and 0 <= y <= max_y
        """
        x, y = pos
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y

    def __str__(self) -> str:
        return f"Grid({self.max_x}x{self.max_y})"

    def __repr__(self) -> str:
        return f"Grid(max_x={self.max_x}, max_y={self.max_y})"
