"""Tryte codec for trytepack.

This module provides the elementary 3-tryte to 2-byte packer and the
fixed-size sequence family built on it.
"""

from __future__ import annotations

from .packer import B16, T9, decode_pair, encode_triple
from .sequence import (
    B48,
    B144,
    B432,
    B1296,
    T27,
    T81,
    T243,
    T721,
    PackedSequence,
    TryteSequence,
    packed_sequence_type,
    tryte_sequence_type,
)

__all__ = [
    # Elementary packer
    "T9",
    "B16",
    "encode_triple",
    "decode_pair",
    # Sequence family
    "TryteSequence",
    "PackedSequence",
    "T27",
    "T81",
    "T243",
    "T721",
    "B48",
    "B144",
    "B432",
    "B1296",
    "tryte_sequence_type",
    "packed_sequence_type",
]
