"""
Configuration settings for the hexbox game.

Board geometry is fixed: the reference board is a hexagon of radius 4
(61 cells, 54 perimeter slots). Gameplay and display values below can be
tuned without touching the core.
"""

from __future__ import annotations

# =============================================================================
# Board Geometry
# =============================================================================

# Cells from the centre cell to an edge cell
BOARD_RADIUS = 4

# Cells per row, top to bottom
ROW_LENGTHS = (5, 6, 7, 8, 9, 8, 7, 6, 5)

NUM_CELLS = 61
NUM_SLOTS = 54

# =============================================================================
# Gameplay
# =============================================================================

NUM_ATOMS = 6

# Score added for each wrong atom-location guess
INCORRECT_GUESS_PENALTY = 5

# Slot offered when typed input is rejected
DEFAULT_ENTRY_SLOT = 1

# =============================================================================
# Markers
# =============================================================================

ABSORBED_MARKER_COLOR = "gray"
REFLECTED_MARKER_COLOR = "white"

# Colours offered for through/deflected marker pairs (cycled with "C")
MARKER_PALETTE = (
    "#ff4040",
    "#ffb000",
    "#40ff70",
    "#30c0ff",
    "#c060ff",
    "#ff70c0",
)

# =============================================================================
# Display
# =============================================================================

HEX_SIZE_PX = 40.0
FIGURE_SIZE_IN = (12.8, 7.2)
