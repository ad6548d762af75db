import pytest

from hexbox.board import CellGraph


@pytest.fixture
def graph():
    return CellGraph()


@pytest.fixture
def make_graph():
    """Build a board with atoms in the given cells."""
    def _make(*atoms, close=False):
        g = CellGraph()
        for cell in atoms:
            g.place_atom(cell)
        if close:
            g.close_setup()
        return g
    return _make
