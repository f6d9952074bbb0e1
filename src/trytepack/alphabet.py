"""Human-readable tryte alphabet.

The digit '9' denotes the zero tryte and the letters 'A' to 'Z' denote
trytes 1 to 26. The mapping is closed: one symbol per tryte value.
"""

from __future__ import annotations

from .exceptions import InvalidTryteValue

ZERO_CHAR = "9"
ALPHABET = ZERO_CHAR + "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

TRYTE_MAX = 26


def char_to_tryte(c: str, *, strict: bool = False) -> int:
    """Map one alphabet character to its tryte value.

    Characters outside the alphabet are not rejected unless ``strict`` is set;
    they map through byte arithmetic and yield an out-of-range tryte.

    Args:
        c: Single character
        strict: Raise instead of wrapping on characters outside the alphabet

    Returns:
        Tryte value (0-26 for alphabet characters)

    Raises:
        InvalidTryteValue: If strict and c is not in the alphabet

    Example:
        >>> char_to_tryte("9"), char_to_tryte("A"), char_to_tryte("Z")
        (0, 1, 26)
    """
    if c == ZERO_CHAR:
        return 0
    if strict and not ("A" <= c <= "Z"):
        raise InvalidTryteValue(f"Character {c!r} is not in the tryte alphabet")
    return (ord(c) - ord("A") + 1) & 0xFF


def tryte_to_char(value: int) -> str:
    """Map a tryte value to its alphabet character.

    Raises:
        InvalidTryteValue: If value is outside 0-26
    """
    if not 0 <= value <= TRYTE_MAX:
        raise InvalidTryteValue(f"Tryte value {value} has no alphabet character (0-{TRYTE_MAX})")
    return ALPHABET[value]
