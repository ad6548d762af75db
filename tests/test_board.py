"""
Test suite for the CellGraph board.

Tests cover:
- Cell layout (rows, numbering, axial coordinates)
- Neighbour topology and link symmetry
- Perimeter slot numbering
- Atom placement and the setup phase
- Snapshots for what-if exploration
"""

from collections import Counter

import pytest

import hexbox.board as board
from hexbox import CellGraph, InvalidEntry, InvalidPlacement, MalformedGraph
from hexbox.hexgrid import opposite_side

CORNERS = {1, 5, 27, 35, 57, 61}


class TestLayout:
    """Test the fixed 61-cell layout."""

    def test_cell_count(self, graph):
        assert len(graph.cells) == 61
        assert [c.value for c in graph.cells] == list(range(1, 62))

    def test_row_lengths(self, graph):
        rows = Counter(c.r for c in graph.cells)
        assert [rows[r] for r in range(-4, 5)] == [5, 6, 7, 8, 9, 8, 7, 6, 5]

    def test_cell_coordinates(self, graph):
        assert graph.cell(1).coords() == (0, -4)
        assert graph.cell(5).coords() == (4, -4)
        assert graph.cell(27).coords() == (-4, 0)
        assert graph.cell(31).coords() == (0, 0)
        assert graph.cell(61).coords() == (0, 4)

    def test_cell_at(self, graph):
        assert graph.cell_at(0, 0) == 31
        assert graph.cell_at(-4, 4) == 57
        assert graph.cell_at(5, 0) is None

    def test_unknown_cell_raises_key_error(self, graph):
        with pytest.raises(KeyError):
            graph.cell(0)
        with pytest.raises(KeyError):
            graph.cell(62)


class TestNeighbors:
    """Test hex neighbour topology."""

    def test_corner_cell_neighbors(self, graph):
        assert graph.neighbor(1, 0) == 2   # E
        assert graph.neighbor(1, 4) == 6   # SW
        assert graph.neighbor(1, 5) == 7   # SE
        assert graph.neighbor(1, 1) is None
        assert graph.neighbor(1, 2) is None
        assert graph.neighbor(1, 3) is None

    def test_center_has_six_neighbors(self, graph):
        assert sorted(graph.cell(31).neighbours()) == [22, 23, 30, 32, 39, 40]

    def test_links_are_symmetric(self, graph):
        for cell in graph.cells:
            for side, other in enumerate(cell.neighbors):
                if other is not None:
                    assert graph.neighbor(other, opposite_side(side)) == cell.value

    def test_boundary_cells(self, graph):
        boundary = {c.value for c in graph.cells if c.is_exit}
        assert len(boundary) == 24
        assert not graph.cell(31).is_exit

    def test_corner_cells_have_three_slots(self, graph):
        for cell in graph.cells:
            n_slots = sum(s is not None for s in cell.exit_slots)
            if cell.value in CORNERS:
                assert n_slots == 3
            elif cell.is_exit:
                assert n_slots == 2


class TestSlots:
    """Test perimeter slot numbering."""

    def test_slot_count_and_numbers(self, graph):
        assert [s.number for s in graph.slots] == list(range(1, 55))

    def test_every_slot_faces_the_rim(self, graph):
        for slot in graph.slots:
            assert graph.neighbor(slot.cell, slot.side) is None
            assert graph.exit_slot_for(slot.cell, slot.side) == slot.number

    def test_slots_are_unique_faces(self, graph):
        faces = {(s.cell, s.side) for s in graph.slots}
        assert len(faces) == 54

    @pytest.mark.parametrize("number,cell,side", [
        (1, 1, 2),    # NW face of the top-left corner
        (2, 1, 3),
        (10, 27, 3),  # W face of the left corner
        (11, 27, 4),
        (28, 61, 5),  # SE face of the bottom-right corner
        (37, 35, 0),  # E face of the right corner
        (45, 5, 0),
        (54, 1, 1),
    ])
    def test_slot_positions(self, graph, number, cell, side):
        slot = graph.slot(number)
        assert (slot.cell, slot.side) == (cell, side)

    def test_inward_direction(self, graph):
        assert graph.slot(1).inward == 5

    def test_interior_face_has_no_slot(self, graph):
        assert graph.exit_slot_for(31, 0) is None

    @pytest.mark.parametrize("number", [0, 55, -1, "3", 2.0, None])
    def test_unknown_slot_raises_invalid_entry(self, graph, number):
        with pytest.raises(InvalidEntry):
            graph.slot(number)


class TestPlacement:
    """Test one-time atom placement."""

    def test_place_and_read(self, graph):
        graph.place_atom(31)
        assert graph.has_atom(31)
        assert not graph.has_atom(30)
        assert graph.atom_cells() == frozenset({31})
        assert graph.atom_count == 1

    def test_second_atom_on_same_cell_is_rejected(self, graph):
        graph.place_atom(12)
        with pytest.raises(InvalidPlacement):
            graph.place_atom(12)
        assert graph.atom_count == 1

    @pytest.mark.parametrize("cell", [0, 62, -3])
    def test_unknown_cell_is_rejected(self, graph, cell):
        with pytest.raises(InvalidPlacement):
            graph.place_atom(cell)
        assert graph.atom_count == 0

    def test_placement_after_setup_is_rejected(self, graph):
        graph.place_atom(1)
        graph.close_setup()
        assert graph.setup_closed
        with pytest.raises(InvalidPlacement):
            graph.place_atom(2)
        assert graph.atom_cells() == frozenset({1})


class TestSnapshot:
    """Test independent copies of the atom flags."""

    def test_snapshot_copies_atoms(self, make_graph):
        g = make_graph(3, 40, close=True)
        copy = g.snapshot()
        assert copy.atom_cells() == frozenset({3, 40})
        assert not copy.setup_closed

    def test_snapshot_is_independent(self, make_graph):
        g = make_graph(3, close=True)
        copy = g.snapshot()
        copy.place_atom(50)
        assert copy.has_atom(50)
        assert not g.has_atom(50)

    def test_snapshot_shares_topology(self, graph):
        assert graph.snapshot().cells is graph.cells


class TestTopologyChecks:
    """Construction fails loudly when the built topology is wrong."""

    @pytest.fixture
    def faces_edited(self, monkeypatch):
        real = board._perimeter_faces

        def _patch(edit):
            monkeypatch.setattr(board, "_perimeter_faces", lambda index, radius: edit(real(index, radius)))
        return _patch

    def test_wrong_cell_count(self, monkeypatch):
        monkeypatch.setattr(board, "NUM_CELLS", 60)
        with pytest.raises(MalformedGraph, match="expected 60 cells"):
            CellGraph()

    def test_wrong_row_lengths(self, monkeypatch):
        monkeypatch.setattr(board, "ROW_LENGTHS", (5,) * 9)
        with pytest.raises(MalformedGraph, match="row lengths"):
            CellGraph()

    def test_missing_slot(self, faces_edited):
        faces_edited(lambda faces: faces[:-1])
        with pytest.raises(MalformedGraph, match="expected 54 slots, built 53"):
            CellGraph()

    def test_open_face_without_slot(self, faces_edited, monkeypatch):
        monkeypatch.setattr(board, "NUM_SLOTS", 53)
        faces_edited(lambda faces: faces[:-1])
        with pytest.raises(MalformedGraph, match="without a slot"):
            CellGraph()

    def test_slot_on_an_interior_face(self, faces_edited):
        # Cell 1's east face leads to cell 2
        faces_edited(lambda faces: faces[:-1] + [(1, 0)])
        with pytest.raises(MalformedGraph, match="both a neighbour and a slot"):
            CellGraph()

    def test_asymmetric_link(self, monkeypatch):
        real = board.step

        def skewed(qr, side):
            if qr == (0, 0) and side == 0:
                return (2, 0)
            return real(qr, side)

        monkeypatch.setattr(board, "step", skewed)
        with pytest.raises(MalformedGraph, match="asymmetric link 31"):
            CellGraph()
