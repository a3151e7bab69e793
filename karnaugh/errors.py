"""Exceptions raised while loading truth tables into a map."""

from __future__ import annotations

from typing import Optional


class KarnaughError(ValueError):
    """Base class for all map construction errors."""


class TruthTableError(KarnaughError):
    """Malformed truth table text."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UnsupportedVariableCount(KarnaughError):
    """An axis would need more variables than the Gray-code order supports."""


class InvalidRowError(KarnaughError):
    """A map row does not match the declared variables."""


__all__ = [
    "KarnaughError",
    "TruthTableError",
    "UnsupportedVariableCount",
    "InvalidRowError",
]
