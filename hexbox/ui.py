from __future__ import annotations
from typing import Callable, Optional
import logging
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection, PolyCollection

from .config import FIGURE_SIZE_IN, MARKER_PALETTE
from .errors import HexboxError, InvalidEntry
from .hexgrid import hex_corners_pointy
from .inputs import parse_entry_slot
from .layout import BoardLayout
from .session import GameSession
from .translations import t

logger = logging.getLogger(__name__)

# --- UI styling (yellow board on black) ---
STYLE = {
    "board_fill": (0.95, 0.80, 0.15, 0.85),
    "board_edge": (0.25, 0.20, 0.05, 1.0),
    "slot_text": "white",
    "atom_fill": (0.1, 0.1, 0.1, 0.9),
    "ray": (1.0, 1.0, 1.0, 0.9),
    "guess_hit": (0.1, 0.8, 0.3, 0.75),
    "guess_miss": (0.9, 0.1, 0.1, 0.9),
    "panel_text": "white",
}


def _style_axes(ax):
    """Dark, clean axes with no ticks."""
    ax.set_xticks([])
    ax.set_yticks([])
    ax.tick_params(left=False, bottom=False, labelleft=False, labelbottom=False)
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.set_facecolor("black")


class BoardUI:
    """
    Interactive Matplotlib window for one game.

    Workflow:
      1) Click a slot number (or type it and press Enter) to fire a ray
      2) Markers appear next to the entry/exit slots
      3) Click a box to guess an atom; wrong guesses cost 5 points
      4) N starts a new game, A shows the hidden atoms and rays
    """

    def __init__(
        self,
        session: GameSession,
        language: str = "en",
        new_session: Optional[Callable[[], GameSession]] = None,
        show_atoms: bool = False,
    ):
        self.session = session
        self.language = language
        self.new_session = new_session
        self.show_atoms = show_atoms
        self.show_numbers = False

        self.color_idx = 0
        self.typed = ""
        self.message_key: Optional[str] = None

        # "c" and "backspace" are game keys here, not navigation
        for key in ("c", "backspace"):
            if key in plt.rcParams["keymap.back"]:
                plt.rcParams["keymap.back"].remove(key)

        self.fig = plt.figure(figsize=FIGURE_SIZE_IN, constrained_layout=True)
        self.fig.patch.set_facecolor("black")
        self.fig.canvas.manager.set_window_title(t("window_title", language))

        gs = self.fig.add_gridspec(1, 2, width_ratios=[3.6, 1.4], wspace=0.04)
        self.ax = self.fig.add_subplot(gs[0, 0])
        self.ax_hud = self.fig.add_subplot(gs[0, 1])

        self._artists = {}
        self._draw_base()

        self.fig.canvas.mpl_connect("button_press_event", self._on_press)
        self.fig.canvas.mpl_connect("key_press_event", self._on_key)

        self._render_state()
        self._update_hud_panel()

    @property
    def marker_color(self) -> str:
        return MARKER_PALETTE[self.color_idx % len(MARKER_PALETTE)]

    def _draw_base(self):
        self.layout = BoardLayout(self.session.graph)
        self.ax.clear()
        self._artists = {}
        _style_axes(self.ax)

        xmin, xmax, ymin, ymax = self.layout.extent()
        self.ax.set_xlim(xmin, xmax)
        self.ax.set_ylim(ymax, ymin)
        self.ax.set_aspect("equal")

        polys = self.layout.cell_polygons()
        self.ax.add_collection(PolyCollection(
            polys, facecolors=[STYLE["board_fill"]], edgecolors=[STYLE["board_edge"]], linewidths=1.2,
        ))

        # Guess overlay
        pc_guess = PolyCollection([], linewidths=2.0)
        self.ax.add_collection(pc_guess)
        self._artists["guesses"] = pc_guess

        # Hidden atoms and ray paths (debug)
        pc_atoms = PolyCollection([], facecolors=[STYLE["atom_fill"]], edgecolors="none")
        self.ax.add_collection(pc_atoms)
        self._artists["atoms"] = pc_atoms

        lc_rays = LineCollection([], colors=[STYLE["ray"]], linewidths=2.5)
        self.ax.add_collection(lc_rays)
        self._artists["rays"] = lc_rays

        # Markers sit behind the slot numbers
        self._artists["markers"] = self.ax.scatter([], [], s=260, zorder=3, edgecolors="none")

        for slot in self.session.graph.slots:
            x, y = self.layout.slot_anchor_xy(slot.number)
            self.ax.text(x, y, str(slot.number), ha="center", va="center", fontsize=8,
                         color=STYLE["slot_text"], zorder=4)

        numbers = []
        for cell in self.session.graph.cells:
            x, y = self.layout.cell_center_xy(cell.value)
            numbers.append(self.ax.text(x, y, str(cell.value), ha="center", va="center",
                                        fontsize=8, color="black", zorder=5))
        self._artists["box_numbers"] = numbers

    # --- state rendering ---
    def _render_state(self):
        s = self.session

        if s.markers:
            xy = np.array([self.layout.slot_anchor_xy(m.slot) for m in s.markers])
            self._artists["markers"].set_offsets(xy)
            self._artists["markers"].set_facecolors([m.color for m in s.markers])
        else:
            self._artists["markers"].set_offsets(np.empty((0, 2)))

        guess_polys, guess_faces, guess_edges = [], [], []
        for cell, correct in s.guesses.items():
            guess_polys.append(hex_corners_pointy(self.layout.cell_center_xy(cell), self.layout.hex_size * 0.8))
            if correct:
                guess_faces.append(STYLE["guess_hit"])
                guess_edges.append(STYLE["guess_hit"])
            else:
                guess_faces.append((0, 0, 0, 0))
                guess_edges.append(STYLE["guess_miss"])
        self._artists["guesses"].set_verts(guess_polys)
        self._artists["guesses"].set_facecolors(guess_faces)
        self._artists["guesses"].set_edgecolors(guess_edges)

        atom_polys = [
            hex_corners_pointy(self.layout.cell_center_xy(c), self.layout.hex_size * 0.55)
            for c in sorted(s.reveal())
        ]
        self._artists["atoms"].set_verts(atom_polys)
        self._artists["atoms"].set_visible(self.show_atoms)

        self._artists["rays"].set_segments([self.layout.ray_polyline(r) for r in s.rays])
        self._artists["rays"].set_visible(self.show_atoms)

        for txt in self._artists["box_numbers"]:
            txt.set_visible(self.show_numbers)

        self.fig.canvas.draw_idle()

    # --- panels ---
    def _update_hud_panel(self):
        lang = self.language
        s = self.session

        status = t(s.last_status.value, lang) if s.last_status is not None else "-"
        block1 = "\n".join([
            f"{t('player', lang)}: {s.player_name}",
            f"{t('score', lang)}: {s.score}",
            f"{t('markers', lang)}: {s.num_markers_used}",
            f"{t('wrong_guesses', lang)}: {s.num_incorrect_guesses}",
            f"{t('atoms_found', lang)}: {len(s.found_atoms)}/{s.num_atoms}",
            f"{t('last_ray', lang)}: {status}",
            f"{t('typed_slot', lang)}: {self.typed or '-'}",
        ])
        block2 = "\n".join([
            t("controls", lang) + ":",
            t("click_slot", lang),
            t("click_cell", lang),
            t("type_slot", lang),
            t("c_color", lang),
            t("a_atoms", lang),
            t("b_numbers", lang),
            t("n_new_game", lang),
            t("esc_quit", lang),
        ])

        axp = self.ax_hud
        axp.clear()
        _style_axes(axp)

        box_kwargs = dict(
            boxstyle="round,pad=0.6",
            facecolor=(0, 0, 0, 0.55),
            edgecolor=self.marker_color,
            linewidth=1.3,
        )
        axp.text(0.05, 0.97, block1, ha="left", va="top", color=STYLE["panel_text"],
                 fontsize=11, family="monospace", transform=axp.transAxes, bbox=box_kwargs)
        axp.text(0.05, 0.52, block2, ha="left", va="top", color=STYLE["panel_text"],
                 fontsize=10, family="monospace", transform=axp.transAxes, bbox=box_kwargs)
        if self.message_key is not None:
            axp.text(0.05, 0.05, t(self.message_key, lang), ha="left", va="bottom",
                     color=self.marker_color, fontsize=11, family="monospace", transform=axp.transAxes)

        self.fig.canvas.draw_idle()

    # --- actions ---
    def _fire(self, slot: int):
        try:
            self.session.fire(slot, self.marker_color)
        except InvalidEntry as e:
            logger.info("Rejected shot: %s", e)
            self.message_key = "slot_used"
        else:
            self.message_key = None

    def _guess(self, cell: int):
        try:
            correct = self.session.guess_atom(cell)
        except HexboxError as e:
            logger.info("Rejected guess: %s", e)
            return
        if self.session.is_solved:
            self.message_key = "solved"
        else:
            self.message_key = "guess_hit" if correct else "guess_miss"

    def restart_game(self):
        """Start over with freshly hidden atoms."""
        if self.new_session is None:
            logger.info("New game requested but no session factory configured")
            return
        self.session = self.new_session()
        self.typed = ""
        self.message_key = None
        self._draw_base()

    # --- event handlers ---
    def _on_press(self, event):
        if event.inaxes != self.ax or event.button != 1 or event.xdata is None:
            return
        xy = np.array([event.xdata, event.ydata], dtype=float)

        slot = self.layout.slot_at_xy(xy)
        if slot is not None:
            self._fire(slot)
        else:
            cell = self.layout.cell_at_xy(xy)
            if cell is None:
                return
            self._guess(cell)

        self._render_state()
        self._update_hud_panel()

    def _on_key(self, event):
        if event.key is None:
            return

        if event.key.isdigit():
            self.typed = (self.typed + event.key)[-2:]

        elif event.key == "backspace":
            self.typed = self.typed[:-1]

        elif event.key == "enter":
            slot, error = parse_entry_slot(self.typed)
            if error is not None:
                self.typed = str(slot)
                self.message_key = error
            else:
                self.typed = ""
                self._fire(slot)

        elif event.key.lower() == "c":
            self.color_idx = (self.color_idx + 1) % len(MARKER_PALETTE)

        elif event.key.lower() == "a":
            self.show_atoms = not self.show_atoms

        elif event.key.lower() == "b":
            self.show_numbers = not self.show_numbers

        elif event.key.lower() == "n":
            self.restart_game()

        elif event.key == "escape":
            plt.close(self.fig)
            return

        else:
            return

        self._render_state()
        self._update_hud_panel()

    def show(self):
        plt.show()
