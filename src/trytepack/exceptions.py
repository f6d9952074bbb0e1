"""Exception hierarchy for trytepack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TrytepackError for easy catching of any trytepack-specific error.
"""

from __future__ import annotations


class TrytepackError(Exception):
    """Base exception for all trytepack errors."""

    pass


class InvalidTryteValue(TrytepackError, ValueError):
    """Raised when a tryte falls outside the range 0-26.

    Only raised at ingress points that opted into validation, and when
    rendering a sequence to the human-readable alphabet.

    Examples:
        - Raw tryte array containing 27 or a negative value
        - Human-readable string containing a character other than 'A'-'Z' or '9'
    """

    pass


class SequenceLengthError(TrytepackError, ValueError):
    """Raised when input does not match the fixed length of a sequence.

    Examples:
        - Raw tryte array with fewer or more than trit_size // 3 entries
        - Packed byte string with fewer or more than 2 * (trit_size // 9) bytes
    """

    pass


class UnsupportedSizeError(TrytepackError, KeyError):
    """Raised when a trit size has no registered sequence type."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""
