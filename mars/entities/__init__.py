"""
Entity definitions for the Mars robot simulation.
"""

from .robot import Robot

__all__ = [
    "Robot",
]
