"""
Exception hierarchy for the Mars robot simulation.

Every failure is fatal for a run: parsing and construction errors are raised
before the first robot moves, so no partial output is ever produced.
"""

from __future__ import annotations
from typing import Optional


class MarsError(Exception):
    """Base class for all simulation errors."""


class ScenarioIOError(MarsError, OSError):
    """The scenario file is missing or cannot be read."""


class ParseError(MarsError, ValueError):
    """
    The scenario text is malformed.

    Attributes:
        line_number: 1-based line of the offending input (None if unknown)
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)

    def at_line(self, line_number: int) -> "ParseError":
        """Return a copy of this error tagged with the given input line."""
        if self.line_number is not None:
            return self
        return ParseError(str(self), line_number)


class ConstructionError(MarsError, ValueError):
    """The scenario is well formed but describes an impossible world or robot."""
