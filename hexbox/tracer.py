"""
Ray tracing over the cell graph.

A ray enters the cell behind its entry slot and walks the board one cell at a
time. At every cell, before moving on, it looks at the cell straight ahead and
at the two cells on either side of that step (the cells touching both the
current cell and the one ahead):

- atom ahead                -> absorbed, the walk stops in the current cell
- atoms on both sides       -> reflected, the ray retraces its cells
- atom on one side          -> turn 60 degrees away from it, re-check here
- no cell ahead (board rim) -> leave through the slot on that face
- otherwise                 -> step forward

Crossing the rim on the way in follows the same face rule as leaving: an atom
in the entry cell absorbs the ray, and an atom beside the entry face sends it
straight back out of its slot. That keeps slot pairs symmetric: a ray that
goes in at A and out at B goes in at B and out at A along the same cells.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple
import logging

from .board import CellGraph, Slot
from .hexgrid import SIDE_NAMES, rotate_side

logger = logging.getLogger(__name__)


class Outcome(Enum):
    THROUGH = "through"
    REFLECTED = "reflected"
    ABSORBED = "absorbed"


@dataclass(frozen=True)
class RayPath:
    """
    Result of one shot.

    `cells` lists the visited cells in order, entry cell first. Absorbed rays
    stop before the atom's cell and have no exit slot. A ray stopped at the
    rim never enters the board and has no cells at all: ABSORBED when its entry
    cell holds an atom, REFLECTED when an atom sits beside the entry face. For
    those the entry slot is the only point of the path. `final_side` is the
    direction of travel when the walk ended.
    """
    entry_slot: int
    cells: Tuple[int, ...]
    outcome: Outcome
    exit_slot: Optional[int]
    final_side: int

    @property
    def absorbed(self) -> bool:
        return self.outcome is Outcome.ABSORBED

    def cell_pairs(self) -> List[Tuple[int, int]]:
        return list(zip(self.cells, self.cells[1:]))


def _atom_on(graph: CellGraph, cell: int, side: int) -> bool:
    other = graph.neighbor(cell, side)
    return other is not None and graph.has_atom(other)


def _entry_flanked(graph: CellGraph, slot: Slot) -> bool:
    return (
        _atom_on(graph, slot.cell, rotate_side(slot.side, 1))
        or _atom_on(graph, slot.cell, rotate_side(slot.side, -1))
    )


def _retrace(entry_slot: int, cells: List[int], outward: int) -> RayPath:
    back = cells[-2::-1] if len(cells) > 1 else []
    return RayPath(
        entry_slot=entry_slot,
        cells=tuple(cells) + tuple(back),
        outcome=Outcome.REFLECTED,
        exit_slot=entry_slot,
        final_side=outward,
    )


def trace(graph: CellGraph, entry_slot: int) -> RayPath:
    """
    Fire a ray in from `entry_slot` and follow it to its end.

    Raises InvalidEntry if `entry_slot` is not a perimeter slot. The first call
    closes the board's setup phase; atom flags are only read.
    """
    slot = graph.slot(entry_slot)
    graph.close_setup()

    cell = slot.cell
    side = slot.inward

    if graph.has_atom(cell):
        logger.debug("Slot %d: absorbed at the rim by an atom in cell %d", entry_slot, cell)
        return RayPath(entry_slot, (), Outcome.ABSORBED, None, side)
    if _entry_flanked(graph, slot):
        logger.debug("Slot %d: reflected at the rim beside cell %d", entry_slot, cell)
        return RayPath(entry_slot, (), Outcome.REFLECTED, entry_slot, slot.side)

    cells: List[int] = [cell]
    seen: Set[Tuple[int, int]] = set()

    while True:
        state = (cell, side)
        if state in seen:
            logger.warning(
                "Slot %d: ray returned to cell %d heading %s; treating it as reflected",
                entry_slot, cell, SIDE_NAMES[side],
            )
            return _retrace(entry_slot, cells, slot.side)
        seen.add(state)

        ahead = graph.neighbor(cell, side)
        if ahead is not None and graph.has_atom(ahead):
            result = RayPath(entry_slot, tuple(cells), Outcome.ABSORBED, None, side)
            break

        left = _atom_on(graph, cell, rotate_side(side, 1))
        right = _atom_on(graph, cell, rotate_side(side, -1))
        if left and right:
            result = _retrace(entry_slot, cells, slot.side)
            break
        if left or right:
            side = rotate_side(side, -1 if left else 1)
            continue

        if ahead is None:
            exit_slot = graph.exit_slot_for(cell, side)
            outcome = Outcome.REFLECTED if exit_slot == entry_slot else Outcome.THROUGH
            result = RayPath(entry_slot, tuple(cells), outcome, exit_slot, side)
            break

        cell = ahead
        cells.append(cell)

    logger.debug(
        "Slot %d: %s via %s -> %s", entry_slot, result.outcome.value, list(result.cells), result.exit_slot
    )
    return result
