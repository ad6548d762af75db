from __future__ import annotations
from typing import Tuple
import numpy as np

Axial = Tuple[int, int]  # (q, r)
SQRT3 = float(np.sqrt(3.0))

# Side k of a POINTY-TOP hex, counter-clockwise from east on screen (y down):
# 0 E, 1 NE, 2 NW, 3 W, 4 SW, 5 SE
AXIAL_DIRS: Tuple[Axial, ...] = (
    (1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)
)
SIDE_NAMES: Tuple[str, ...] = ("E", "NE", "NW", "W", "SW", "SE")


def axial_add(a: Axial, b: Axial) -> Axial:
    return (a[0] + b[0], a[1] + b[1])


def step(a: Axial, side: int) -> Axial:
    return axial_add(a, AXIAL_DIRS[side])


def opposite_side(side: int) -> int:
    return (side + 3) % 6


def rotate_side(side: int, steps: int) -> int:
    """Positive steps turn counter-clockwise, negative clockwise (60 degrees each)."""
    return (side + steps) % 6


def hex_to_pixel_pointy(ax: np.ndarray, size: float, origin_xy: np.ndarray) -> np.ndarray:
    """
    Axial -> pixel for POINTY-TOP hexes.

    Parameters
    ----------
    ax : array-like [...,2] with (q,r)
    size : float
        Hex radius in pixels (center->corner).
    origin_xy : (2,)
        Pixel coordinate corresponding to hex (0,0) center.
    """
    ax = np.asarray(ax, dtype=float)
    q, r = ax[..., 0], ax[..., 1]
    x = size * (SQRT3 * q + SQRT3 / 2.0 * r)
    y = size * (1.5 * r)
    return np.stack([x, y], axis=-1) + origin_xy


def pixel_to_hex_pointy(xy: np.ndarray, size: float, origin_xy: np.ndarray) -> np.ndarray:
    """
    Pixel -> fractional axial (q,r) for POINTY-TOP hexes.
    """
    p = np.asarray(xy, dtype=float) - origin_xy
    x, y = p[..., 0], p[..., 1]
    q = (SQRT3 / 3.0 * x - 1.0 / 3.0 * y) / size
    r = (2.0 / 3.0 * y) / size
    return np.stack([q, r], axis=-1)


def axial_round(frac_qr: np.ndarray) -> Axial:
    """
    Round fractional axial coords to nearest hex using cube-rounding.
    """
    q, r = float(frac_qr[0]), float(frac_qr[1])
    x = q
    z = r
    y = -x - z

    rx, ry, rz = round(x), round(y), round(z)
    dx, dy, dz = abs(rx - x), abs(ry - y), abs(rz - z)

    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry

    return (int(rx), int(rz))


def side_unit_xy(side: int) -> np.ndarray:
    """Unit vector (pixel space, y down) from a hex center towards its neighbour on `side`."""
    v = hex_to_pixel_pointy(np.array(AXIAL_DIRS[side], dtype=float), 1.0, np.zeros(2))
    return v / np.linalg.norm(v)


def hex_corners_pointy(center_xy: np.ndarray, size: float) -> np.ndarray:
    cx, cy = float(center_xy[0]), float(center_xy[1])
    angles = np.deg2rad(np.array([30, 90, 150, 210, 270, 330], dtype=float))
    x = cx + size * np.cos(angles)
    y = cy + size * np.sin(angles)
    return np.stack([x, y], axis=1)
