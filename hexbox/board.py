from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple
import copy
import logging
import numpy as np

from .config import BOARD_RADIUS, NUM_CELLS, NUM_SLOTS, ROW_LENGTHS
from .errors import InvalidEntry, InvalidPlacement, MalformedGraph
from .hexgrid import Axial, SIDE_NAMES, opposite_side, step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """
    One interior hex cell.

    `value` is the public box number (1..61, row-major). Both `neighbors` and
    `exit_slots` are indexed by side 0..5; a side has either a neighbour or
    (on the rim) a perimeter slot, never both.
    """
    value: int
    q: int
    r: int
    neighbors: Tuple[Optional[int], ...]
    exit_slots: Tuple[Optional[int], ...]

    @property
    def is_exit(self) -> bool:
        return any(s is not None for s in self.exit_slots)

    def coords(self) -> Axial:
        return (self.q, self.r)

    def neighbours(self) -> Iterable[int]:
        for n in self.neighbors:
            if n is not None:
                yield n


@dataclass(frozen=True)
class Slot:
    """A perimeter entry/exit point: the outward face `side` of boundary cell `cell`."""
    number: int
    cell: int
    side: int

    @property
    def inward(self) -> int:
        """Direction of travel for a ray fired in from this slot."""
        return opposite_side(self.side)


def _axial_layout(radius: int) -> List[Axial]:
    """Axial coordinates of every cell, top row first, west to east in each row."""
    coords: List[Axial] = []
    for r in range(-radius, radius + 1):
        for q in range(max(-radius, -radius - r), min(radius, radius - r) + 1):
            coords.append((q, r))
    return coords


def _perimeter_faces(index: Dict[Axial, int], radius: int) -> List[Tuple[int, int]]:
    """
    (cell, side) pairs of the rim in slot order.

    Walks the six edges of the board counter-clockwise starting at the top-left
    corner cell. Along edge j every cell exposes two outward faces; corner cells
    are shared by two edges and expose a third, so faces already listed are
    skipped.
    """
    faces: List[Tuple[int, int]] = []
    seen = set()
    qr: Axial = (0, -radius)
    for j in range(6):
        walk = (4 + j) % 6
        outward = ((2 + j) % 6, (3 + j) % 6)
        for i in range(radius + 1):
            cell = index[qr]
            for side in outward:
                if (cell, side) not in seen:
                    seen.add((cell, side))
                    faces.append((cell, side))
            if i < radius:
                qr = step(qr, walk)
    return faces


class CellGraph:
    """
    The 61-cell hexagonal board with its 54 perimeter slots.

    - Topology (cells, neighbours, slots) is built once and never changes.
    - Atom flags live in a flat boolean array indexed by cell value.
    - Atoms may only be placed while setup is open; `close_setup` ends it.
    """

    def __init__(self):
        coords = _axial_layout(BOARD_RADIUS)
        index: Dict[Axial, int] = {qr: i + 1 for i, qr in enumerate(coords)}

        faces = _perimeter_faces(index, BOARD_RADIUS)
        slot_of: Dict[Tuple[int, int], int] = {face: n + 1 for n, face in enumerate(faces)}

        cells: List[Cell] = []
        for qr in coords:
            value = index[qr]
            neighbors = tuple(index.get(step(qr, side)) for side in range(6))
            exits = tuple(slot_of.get((value, side)) for side in range(6))
            cells.append(Cell(value=value, q=qr[0], r=qr[1], neighbors=neighbors, exit_slots=exits))

        self._cells: Tuple[Cell, ...] = tuple(cells)
        self._index = index
        self._slots: Tuple[Slot, ...] = tuple(
            Slot(number=n + 1, cell=cell, side=side) for n, (cell, side) in enumerate(faces)
        )
        self._atoms = np.zeros(len(cells) + 1, dtype=bool)  # index 0 unused
        self._setup_closed = False

        self._check_topology()
        logger.debug("Built board: %d cells, %d slots", len(self._cells), len(self._slots))

    # --- topology checks ---
    def _check_topology(self) -> None:
        if len(self._cells) != NUM_CELLS:
            raise MalformedGraph(f"expected {NUM_CELLS} cells, built {len(self._cells)}")
        if len(self._slots) != NUM_SLOTS:
            raise MalformedGraph(f"expected {NUM_SLOTS} slots, built {len(self._slots)}")
        rows = tuple(sum(1 for c in self._cells if c.r == r) for r in range(-BOARD_RADIUS, BOARD_RADIUS + 1))
        if rows != ROW_LENGTHS:
            raise MalformedGraph(f"unexpected row lengths {rows}")

        for cell in self._cells:
            for side, other in enumerate(cell.neighbors):
                has_slot = cell.exit_slots[side] is not None
                if other is None:
                    if not has_slot:
                        raise MalformedGraph(
                            f"cell {cell.value} has an open {SIDE_NAMES[side]} face without a slot"
                        )
                    continue
                if has_slot:
                    raise MalformedGraph(
                        f"cell {cell.value} has both a neighbour and a slot on side {SIDE_NAMES[side]}"
                    )
                back = self.cell(other).neighbors[opposite_side(side)]
                if back != cell.value:
                    raise MalformedGraph(
                        f"asymmetric link {cell.value} -{SIDE_NAMES[side]}-> {other} (back link: {back})"
                    )

    # --- read access ---
    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self._cells

    @property
    def slots(self) -> Tuple[Slot, ...]:
        return self._slots

    def cell(self, value: int) -> Cell:
        if not 1 <= value <= len(self._cells):
            raise KeyError(f"Cell {value} is not on the board")
        return self._cells[value - 1]

    def cell_at(self, q: int, r: int) -> Optional[int]:
        return self._index.get((q, r))

    def slot(self, number: int) -> Slot:
        if not isinstance(number, (int, np.integer)) or not 1 <= number <= len(self._slots):
            raise InvalidEntry(f"{number!r} is not a perimeter slot (1..{len(self._slots)})")
        return self._slots[int(number) - 1]

    def neighbor(self, cell: int, side: int) -> Optional[int]:
        return self.cell(cell).neighbors[side]

    def exit_slot_for(self, cell: int, side: int) -> Optional[int]:
        return self.cell(cell).exit_slots[side]

    def has_atom(self, cell: int) -> bool:
        return bool(self._atoms[self.cell(cell).value])

    def atom_cells(self) -> FrozenSet[int]:
        return frozenset(int(v) for v in np.flatnonzero(self._atoms))

    @property
    def atom_count(self) -> int:
        return int(self._atoms.sum())

    # --- setup phase ---
    @property
    def setup_closed(self) -> bool:
        return self._setup_closed

    def place_atom(self, cell: int) -> None:
        if self._setup_closed:
            raise InvalidPlacement(f"cannot place an atom in cell {cell}: setup is closed")
        if not isinstance(cell, (int, np.integer)) or not 1 <= cell <= len(self._cells):
            raise InvalidPlacement(f"{cell!r} is not a cell on the board")
        if self._atoms[cell]:
            raise InvalidPlacement(f"cell {cell} already holds an atom")
        self._atoms[cell] = True
        logger.debug("Placed atom in cell %d", cell)

    def close_setup(self) -> None:
        self._setup_closed = True

    def snapshot(self) -> "CellGraph":
        """
        Copy of this board for what-if exploration.

        Topology is shared (it is immutable); atom flags are copied and setup is
        reopened so the copy can take extra atoms without touching the original.
        """
        other = copy.copy(self)
        other._atoms = self._atoms.copy()
        other._setup_closed = False
        return other
