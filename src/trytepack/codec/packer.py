"""Elementary tryte-triple packing and unpacking.

Three trytes (9 trits, 0-26 each) pack into two bytes:

    b0 = t0 + 27 * (t2 % 3)      # 0-80 for valid input
    b1 = t1 + 27 * (t2 // 3)     # 0-242 for valid input

and unpack with the exact inverse:

    t0 = b0 % 27
    t1 = b1 % 27
    t2 = b0 // 27 + 3 * (b1 // 27)

Neither direction validates its input. Encoding wraps modulo 256 like byte
arithmetic; decoding accepts any byte pair, and t2 may exceed 26 for pairs
that encoding never produces.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..alphabet import char_to_tryte

TRYTE_BASE = 27


def encode_triple(t0: int, t1: int, t2: int) -> tuple[int, int]:
    """Pack three trytes into a byte pair.

    Args:
        t0: First tryte (0-26)
        t1: Second tryte (0-26)
        t2: Third tryte (0-26), split across the high parts of both bytes

    Returns:
        Tuple (b0, b1) with b0 in 0-80 and b1 in 0-242 for in-range input

    Example:
        >>> encode_triple(26, 26, 26)
        (80, 242)
    """
    b0 = (t0 + TRYTE_BASE * (t2 % 3)) & 0xFF
    b1 = (t1 + TRYTE_BASE * (t2 // 3)) & 0xFF
    return b0, b1


def decode_pair(b0: int, b1: int) -> tuple[int, int, int]:
    """Unpack a byte pair into three trytes.

    Args:
        b0: First byte
        b1: Second byte

    Returns:
        Tuple (t0, t1, t2)

    Example:
        >>> decode_pair(80, 242)
        (26, 26, 26)
    """
    t0 = b0 % TRYTE_BASE
    t1 = b1 % TRYTE_BASE
    t2 = b0 // TRYTE_BASE + 3 * (b1 // TRYTE_BASE)
    return t0, t1, t2


@dataclass(frozen=True)
class T9:
    """Three trytes, 9 trits."""

    t0: int
    t1: int
    t2: int

    def encode(self) -> B16:
        return B16(*encode_triple(self.t0, self.t1, self.t2))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.t0, self.t1, self.t2)

    @classmethod
    def from_human_readable(cls, c0: str, c1: str, c2: str, *, strict: bool = False) -> T9:
        """Build a triple from three alphabet characters."""
        return cls(
            char_to_tryte(c0, strict=strict),
            char_to_tryte(c1, strict=strict),
            char_to_tryte(c2, strict=strict),
        )


@dataclass(frozen=True)
class B16:
    """Two bytes holding the packed form of one T9."""

    b0: int
    b1: int

    def decode(self) -> T9:
        return T9(*decode_pair(self.b0, self.b1))

    def as_tuple(self) -> tuple[int, int]:
        return (self.b0, self.b1)
