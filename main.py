"""
Main entry point for the hexbox game.
Hides the atoms, then opens the board window.
"""

import argparse
import logging

from hexbox.session import GameSession
from hexbox.ui import BoardUI


def start_game(language: str, seed=None, show_atoms: bool = False, player_name=None):
    """
    Start a game in the board window.

    Args:
        language: Selected language code ("en" or "nl")
        seed: Optional seed for the atom positions (first game only)
        show_atoms: Start with the hidden atoms and rays visible
        player_name: Name shown in the HUD; kept for every new game
    """
    session = GameSession(rng=seed, player_name=player_name)
    logging.getLogger(__name__).info("Starting game for %s (language: %s)", session.player_name, language)

    ui = BoardUI(
        session,
        language=language,
        new_session=lambda: GameSession(player_name=ui.session.player_name),
        show_atoms=show_atoms,
    )
    ui.show()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Hexagonal Black Box deduction game")
    parser.add_argument("--lang", choices=("en", "nl"), default="en", help="interface language")
    parser.add_argument("--seed", type=int, default=None, help="seed for the hidden atoms")
    parser.add_argument("--name", default=None, help="player name (default: a random userNNNNN)")
    parser.add_argument("--debug", action="store_true", help="verbose logging and visible atoms")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    start_game(args.lang, seed=args.seed, show_atoms=args.debug, player_name=args.name)


if __name__ == "__main__":
    main()
