import numpy as np
import pytest

from hexbox import trace
from hexbox.layout import BoardLayout


@pytest.fixture
def layout(graph):
    return BoardLayout(graph, hex_size_px=20.0, origin_xy=np.array([300.0, 200.0]))


class TestBoardLayout:
    """Test the pixel table."""

    def test_center_cell_at_origin(self, layout):
        assert np.allclose(layout.cell_center_xy(31), [300.0, 200.0])

    def test_cell_lookup_from_centers(self, layout, graph):
        for cell in graph.cells:
            assert layout.cell_at_xy(layout.cell_center_xy(cell.value)) == cell.value

    def test_outside_board_is_no_cell(self, layout):
        assert layout.cell_at_xy(np.array([0.0, 0.0])) is None

    def test_slot_lookup_from_anchors(self, layout, graph):
        for slot in graph.slots:
            assert layout.slot_at_xy(layout.slot_anchor_xy(slot.number)) == slot.number

    def test_slot_anchors_are_off_board(self, layout, graph):
        for slot in graph.slots:
            assert layout.cell_at_xy(layout.slot_anchor_xy(slot.number)) is None

    def test_no_slot_in_the_middle(self, layout):
        assert layout.slot_at_xy(layout.cell_center_xy(31)) is None

    def test_top_left_slot_is_up_left_of_cell_one(self, layout):
        s1 = layout.slot_anchor_xy(1)
        c1 = layout.cell_center_xy(1)
        assert s1[0] < c1[0] and s1[1] < c1[1]

    def test_polyline_for_through_ray(self, layout, graph):
        ray = trace(graph, 1)
        pts = layout.ray_polyline(ray)
        assert pts.shape == (len(ray.cells) + 2, 2)
        assert np.allclose(pts[0], layout.slot_anchor_xy(1))
        assert np.allclose(pts[-1], layout.slot_anchor_xy(28))

    def test_polyline_for_absorbed_ray(self, make_graph):
        g = make_graph(7)
        lay = BoardLayout(g)
        pts = lay.ray_polyline(trace(g, 1))
        assert pts.shape == (2, 2)
        assert np.allclose(pts[-1], lay.cell_center_xy(1))

    def test_extent_covers_slots(self, layout):
        xmin, xmax, ymin, ymax = layout.extent()
        assert xmin < layout.slot_xy[:, 0].min()
        assert ymax > layout.slot_xy[:, 1].max()
