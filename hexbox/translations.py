"""
Centralized translations for the hexbox game.
English and Dutch language support.
"""

TRANSLATIONS = {
    "en": {
        "window_title": "Hexbox",

        # HUD
        "player": "PLAYER",
        "score": "SCORE",
        "markers": "MARKERS",
        "wrong_guesses": "WRONG GUESSES",
        "atoms_found": "ATOMS FOUND",
        "last_ray": "LAST RAY",
        "typed_slot": "SLOT",
        "marker_color": "MARKER",

        # Ray outcomes
        "through": "through/deflected",
        "reflected": "reflected",
        "absorbed": "absorbed",

        # Controls section
        "controls": "Controls",
        "click_slot": "• Click number: fire",
        "click_cell": "• Click box: guess atom",
        "type_slot": "• 1-54 + Enter: fire",
        "c_color": "• C: marker colour",
        "a_atoms": "• A: show atoms",
        "b_numbers": "• B: box numbers",
        "n_new_game": "• N: new game",
        "esc_quit": "• Esc: quit",

        # Messages
        "invalid_integer": "Please enter a valid integer.",
        "entry_out_of_range": "Enter a number between 1 and 54.",
        "slot_used": "That slot has already been used.",
        "guess_hit": "Atom found!",
        "guess_miss": "No atom there (+5).",
        "solved": "All atoms found!",
    },

    "nl": {
        "window_title": "Hexbox",

        # HUD
        "player": "SPELER",
        "score": "SCORE",
        "markers": "MARKERS",
        "wrong_guesses": "FOUTE GOKKEN",
        "atoms_found": "ATOMEN GEVONDEN",
        "last_ray": "LAATSTE STRAAL",
        "typed_slot": "INGANG",
        "marker_color": "MARKER",

        # Ray outcomes
        "through": "door/afgebogen",
        "reflected": "teruggekaatst",
        "absorbed": "geabsorbeerd",

        # Controls section
        "controls": "Bediening",
        "click_slot": "• Klik nummer: vuur",
        "click_cell": "• Klik vak: gok atoom",
        "type_slot": "• 1-54 + Enter: vuur",
        "c_color": "• C: markerkleur",
        "a_atoms": "• A: toon atomen",
        "b_numbers": "• B: vaknummers",
        "n_new_game": "• N: nieuw spel",
        "esc_quit": "• Esc: afsluiten",

        # Messages
        "invalid_integer": "Voer een geldig geheel getal in.",
        "entry_out_of_range": "Voer een getal tussen 1 en 54 in.",
        "slot_used": "Die ingang is al gebruikt.",
        "guess_hit": "Atoom gevonden!",
        "guess_miss": "Daar zit geen atoom (+5).",
        "solved": "Alle atomen gevonden!",
    }
}


def t(key: str, lang: str = "en") -> str:
    """
    Get translated text for a given key.

    Args:
        key: Translation key
        lang: Language code ("en" or "nl")

    Returns:
        Translated string, or the key itself if not found
    """
    if lang not in TRANSLATIONS:
        lang = "en"
    return TRANSLATIONS[lang].get(key, key)
