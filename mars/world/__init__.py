"""
World state management for the Mars robot simulation.

This module provides:
- Grid: Bounds checking
- World: Grid plus scent set and the forward stepping rule
"""

from .grid import Grid
from .world import World

__all__ = [
    "Grid",
    "World",
]
