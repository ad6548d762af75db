"""
Hexbox: a hexagonal Black Box deduction game.

Core modules:
- hexgrid: axial hex math (sides, rotation, pixel transforms)
- board: CellGraph, Cell and Slot
- tracer: trace() and RayPath
- atoms: random atom placement
- session: GameSession (markers, guesses, score)
- inputs: typed slot validation
- layout: BoardLayout pixel table
- ui: Matplotlib UI (BoardUI)
"""
from .board import Cell, CellGraph, Slot
from .errors import HexboxError, InvalidEntry, InvalidGuess, InvalidPlacement, MalformedGraph
from .tracer import Outcome, RayPath, trace

__all__ = [
    "Cell",
    "CellGraph",
    "Slot",
    "HexboxError",
    "InvalidEntry",
    "InvalidGuess",
    "InvalidPlacement",
    "MalformedGraph",
    "Outcome",
    "RayPath",
    "trace",
]
