from __future__ import annotations
from typing import List, Optional, Union
import logging
import numpy as np

from .board import CellGraph
from .config import NUM_ATOMS
from .errors import InvalidPlacement

logger = logging.getLogger(__name__)


def place_random_atoms(
    graph: CellGraph,
    count: int = NUM_ATOMS,
    rng: Optional[Union[int, np.random.Generator]] = None,
) -> List[int]:
    """
    Hide `count` atoms in distinct cells chosen uniformly at random.

    A draw that lands on an occupied cell is re-rolled.

    Args:
        graph: Board still in its setup phase
        count: Number of atoms to add
        rng: Seed or numpy Generator; None draws fresh entropy

    Returns:
        Cell values that received an atom, in placement order
    """
    rng = np.random.default_rng(rng)
    n_cells = len(graph.cells)
    free = n_cells - graph.atom_count
    if count > free:
        raise InvalidPlacement(f"cannot place {count} atoms: only {free} free cells")

    placed: List[int] = []
    while len(placed) < count:
        value = int(rng.integers(1, n_cells + 1))
        if graph.has_atom(value):
            continue
        graph.place_atom(value)
        placed.append(value)

    logger.debug("Hid %d atoms", len(placed))
    return placed
