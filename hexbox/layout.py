from __future__ import annotations
from typing import Optional
import numpy as np

from .board import CellGraph
from .config import HEX_SIZE_PX
from .hexgrid import (
    SQRT3,
    axial_round,
    hex_corners_pointy,
    hex_to_pixel_pointy,
    pixel_to_hex_pointy,
    side_unit_xy,
)
from .tracer import RayPath


class BoardLayout:
    """
    Pixel coordinates for a CellGraph.

    - Cells are POINTY-TOP hexes; the centre cell sits at `origin_xy`.
    - Slot anchors sit just outside the face they belong to.
    - Pixel y grows downwards (draw with an inverted y axis).
    """

    def __init__(
        self,
        graph: CellGraph,
        hex_size_px: float = HEX_SIZE_PX,
        origin_xy: Optional[np.ndarray] = None,
        slot_offset: float = 1.35,
    ):
        self.graph = graph
        self.hex_size = float(hex_size_px)
        if origin_xy is None:
            origin_xy = np.zeros(2)
        self.origin_xy = np.array(origin_xy, dtype=float)

        axial = np.array([c.coords() for c in graph.cells], dtype=float)
        self.cell_xy = hex_to_pixel_pointy(axial, self.hex_size, self.origin_xy)  # row i -> cell i+1

        apothem = self.hex_size * SQRT3 / 2.0
        anchors = []
        for slot in graph.slots:
            center = self.cell_xy[slot.cell - 1]
            anchors.append(center + side_unit_xy(slot.side) * apothem * slot_offset)
        self.slot_xy = np.array(anchors, dtype=float)  # row i -> slot i+1

    # --- coordinate helpers ---
    def cell_center_xy(self, cell: int) -> np.ndarray:
        return self.cell_xy[cell - 1]

    def slot_anchor_xy(self, slot: int) -> np.ndarray:
        return self.slot_xy[slot - 1]

    def cell_polygons(self) -> list[np.ndarray]:
        return [hex_corners_pointy(c, self.hex_size) for c in self.cell_xy]

    def extent(self, margin: float = 1.5) -> tuple[float, float, float, float]:
        """(xmin, xmax, ymin, ymax) covering every cell and slot anchor."""
        pts = np.vstack([self.cell_xy, self.slot_xy])
        pad = self.hex_size * margin
        return (
            float(pts[:, 0].min() - pad),
            float(pts[:, 0].max() + pad),
            float(pts[:, 1].min() - pad),
            float(pts[:, 1].max() + pad),
        )

    def cell_at_xy(self, xy: np.ndarray) -> Optional[int]:
        frac = pixel_to_hex_pointy(np.asarray(xy, dtype=float), self.hex_size, self.origin_xy)
        q, r = axial_round(frac)
        return self.graph.cell_at(q, r)

    def slot_at_xy(self, xy: np.ndarray, radius: float = 0.45) -> Optional[int]:
        """Nearest slot anchor within `radius` hex sizes of `xy`, else None."""
        d = np.linalg.norm(self.slot_xy - np.asarray(xy, dtype=float), axis=1)
        i = int(np.argmin(d))
        if d[i] > radius * self.hex_size:
            return None
        return i + 1

    def ray_polyline(self, ray: RayPath) -> np.ndarray:
        """
        Points to draw for a ray: entry anchor, cell centres, then the exit
        anchor. Absorbed rays end in their last safe cell; rays stopped at the
        rim have no cells and draw only their slot anchors.
        """
        pts = [self.slot_anchor_xy(ray.entry_slot)]
        pts.extend(self.cell_center_xy(c) for c in ray.cells)
        if ray.exit_slot is not None:
            pts.append(self.slot_anchor_xy(ray.exit_slot))
        return np.array(pts, dtype=float)
