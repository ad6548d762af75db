"""Typed failure conditions raised by the board, the tracer and the session."""
from __future__ import annotations


class HexboxError(Exception):
    """Base class for every recoverable hexbox error."""


class InvalidEntry(HexboxError, ValueError):
    """A ray was requested from a slot that is unknown or already used."""


class InvalidPlacement(HexboxError, ValueError):
    """An atom could not be placed (occupied cell, unknown cell or setup closed)."""


class MalformedGraph(HexboxError, RuntimeError):
    """The board topology failed its construction checks."""


class InvalidGuess(HexboxError, ValueError):
    """An atom guess named a cell that is not on the board."""
