"""
Validation of typed slot numbers.

Runs at the UI boundary so the tracer only ever sees well-formed slots.
"""
from __future__ import annotations
from typing import Optional, Tuple

from .config import DEFAULT_ENTRY_SLOT, NUM_SLOTS


def parse_entry_slot(
    text: str,
    num_slots: int = NUM_SLOTS,
    default: int = DEFAULT_ENTRY_SLOT,
) -> Tuple[int, Optional[str]]:
    """
    Parse a typed entry slot.

    Returns (slot, None) for valid input, or (default, message_key) when the
    text is not an integer or is out of range; message_key is a translation key
    for the re-prompt.
    """
    try:
        value = int(str(text).strip())
    except ValueError:
        return default, "invalid_integer"
    if not 1 <= value <= num_slots:
        return default, "entry_out_of_range"
    return value, None
