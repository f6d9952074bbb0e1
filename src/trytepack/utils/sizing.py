"""Size calculation utilities.

This module provides functions to calculate the group, tryte and byte counts
of a sequence without building one.
"""

from __future__ import annotations

from ..exceptions import UnsupportedSizeError

SUPPORTED_TRIT_SIZES: tuple[int, ...] = (27, 81, 243, 721)

TRITS_PER_GROUP = 9
TRITS_PER_TRYTE = 3
BYTES_PER_GROUP = 2


def check_trit_size(trit_size: int) -> int:
    """Return trit_size unchanged if it is supported.

    Raises:
        UnsupportedSizeError: If trit_size is not one of SUPPORTED_TRIT_SIZES
    """
    if trit_size not in SUPPORTED_TRIT_SIZES:
        supported = ", ".join(str(size) for size in SUPPORTED_TRIT_SIZES)
        raise UnsupportedSizeError(f"Unsupported trit size {trit_size} (supported: {supported})")
    return trit_size


def group_count(trit_size: int) -> int:
    """Number of tryte-triples (and packed pairs) in a sequence.

    Uses integer division, so 721 trits hold 80 groups.

    Example:
        >>> group_count(243)
        27
    """
    return trit_size // TRITS_PER_GROUP


def tryte_count(trit_size: int) -> int:
    """Number of individual trytes in a sequence (always 3 * group_count).

    Example:
        >>> tryte_count(721)
        240
    """
    return TRITS_PER_TRYTE * group_count(trit_size)


def packed_size(trit_size: int) -> int:
    """Size in bytes of the packed form of a sequence.

    Example:
        >>> packed_size(81)
        18
    """
    return BYTES_PER_GROUP * group_count(trit_size)


def packed_bits(trit_size: int) -> int:
    """Size in bits of the packed form of a sequence."""
    return 8 * packed_size(trit_size)


def size_table() -> dict[int, dict[str, int]]:
    """Sizes for every supported trit count.

    Returns:
        Dictionary mapping trit size to its groups, trytes, bytes and bits
    """
    return {
        size: {
            "groups": group_count(size),
            "trytes": tryte_count(size),
            "bytes": packed_size(size),
            "bits": packed_bits(size),
        }
        for size in SUPPORTED_TRIT_SIZES
    }
