from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Set, Union
import logging
import numpy as np

from .atoms import place_random_atoms
from .board import CellGraph
from .config import (
    ABSORBED_MARKER_COLOR,
    INCORRECT_GUESS_PENALTY,
    MARKER_PALETTE,
    NUM_ATOMS,
    REFLECTED_MARKER_COLOR,
)
from .errors import InvalidEntry, InvalidGuess
from .tracer import Outcome, RayPath, trace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Marker:
    """A coloured marker next to a perimeter slot."""
    slot: int
    color: str


class GameSession:
    """
    State of one game: hidden atoms, shots fired, markers and score.

    The board is filled and sealed on construction; every shot goes through
    `trace` and the result is folded into markers, visited slots and score.
    Score = markers used + INCORRECT_GUESS_PENALTY per wrong atom guess
    (lower is better).
    """

    def __init__(
        self,
        graph: Optional[CellGraph] = None,
        num_atoms: int = NUM_ATOMS,
        rng: Optional[Union[int, np.random.Generator]] = None,
        player_name: Optional[str] = None,
    ):
        self._rng = np.random.default_rng(rng)
        self.graph = graph if graph is not None else CellGraph()
        if not self.graph.setup_closed and self.graph.atom_count == 0:
            place_random_atoms(self.graph, num_atoms, self._rng)
        self.graph.close_setup()
        self.num_atoms = self.graph.atom_count

        self.player_name = player_name or f"user{int(self._rng.integers(0, 100000))}"
        self.rays: List[RayPath] = []
        self.markers: List[Marker] = []
        self.visited_slots: Set[int] = set()
        self.guesses: Dict[int, bool] = {}
        self.last_status: Optional[Outcome] = None

    # --- shots ---
    def can_fire(self, slot: int) -> bool:
        return slot not in self.visited_slots

    def fire(self, slot: int, color: str = MARKER_PALETTE[0]) -> RayPath:
        """
        Shoot a ray from `slot` and record the outcome.

        Raises InvalidEntry for unknown slots and for slots already used by a
        previous ray (as its entry or its exit).
        """
        if slot in self.visited_slots:
            raise InvalidEntry(f"slot {slot} has already been used")
        ray = trace(self.graph, slot)

        self.visited_slots.add(ray.entry_slot)
        if ray.outcome is Outcome.THROUGH:
            self.visited_slots.add(ray.exit_slot)
            self.markers.append(Marker(ray.entry_slot, color))
            self.markers.append(Marker(ray.exit_slot, color))
        elif ray.outcome is Outcome.ABSORBED:
            self.markers.append(Marker(ray.entry_slot, ABSORBED_MARKER_COLOR))
        else:
            self.markers.append(Marker(ray.entry_slot, REFLECTED_MARKER_COLOR))

        self.rays.append(ray)
        self.last_status = ray.outcome
        logger.info("%s fired slot %d: %s", self.player_name, slot, ray.outcome.value)
        return ray

    # --- guesses ---
    def guess_atom(self, cell: int) -> bool:
        """
        Guess that `cell` hides an atom.

        A wrong guess costs the penalty once; asking about the same cell again
        returns the earlier answer for free. Raises InvalidGuess for a cell
        that is not on the board.
        """
        if not isinstance(cell, (int, np.integer)) or not 1 <= cell <= len(self.graph.cells):
            raise InvalidGuess(f"{cell!r} is not a cell on the board")
        if cell in self.guesses:
            return self.guesses[cell]
        correct = self.graph.has_atom(cell)
        self.guesses[cell] = correct
        logger.info("%s guessed cell %d: %s", self.player_name, cell, "hit" if correct else "miss")
        return correct

    @property
    def found_atoms(self) -> FrozenSet[int]:
        return frozenset(c for c, ok in self.guesses.items() if ok)

    @property
    def num_incorrect_guesses(self) -> int:
        return sum(1 for ok in self.guesses.values() if not ok)

    @property
    def num_markers_used(self) -> int:
        return len(self.markers)

    @property
    def score(self) -> int:
        return self.num_markers_used + self.num_incorrect_guesses * INCORRECT_GUESS_PENALTY

    @property
    def is_solved(self) -> bool:
        return len(self.found_atoms) == self.num_atoms

    def reveal(self) -> FrozenSet[int]:
        return self.graph.atom_cells()
