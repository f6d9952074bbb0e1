"""trytepack: Compact Tryte Codec

A Python library that packs fixed-length sequences of trytes (base-27 digits,
3 trits each) into bytes, three trytes to two bytes, and unpacks them again
losslessly.

Key Features:
- Elementary 3-tryte to 2-byte packer
- Fixed-size sequences of 27, 81, 243 and 721 trits
- Human-readable alphabet ('9' and 'A'-'Z')
- Pydantic interchange records

Quick Start:
    >>> from trytepack import T243
    >>>
    >>> seq = T243.from_human_readable("AB9C")
    >>> packed = seq.encode()
    >>> data = packed.to_bytes()
    >>> packed.decode().as_tryte_array()[:5]
    [1, 2, 0, 3, 0]
"""

from __future__ import annotations

from .alphabet import ALPHABET, char_to_tryte, tryte_to_char
from .codec import (
    B16,
    B48,
    B144,
    B432,
    B1296,
    T9,
    T27,
    T81,
    T243,
    T721,
    PackedSequence,
    TryteSequence,
    decode_pair,
    encode_triple,
    packed_sequence_type,
    tryte_sequence_type,
)
from .config import CodecConfig
from .exceptions import (
    InvalidTryteValue,
    SequenceLengthError,
    TrytepackError,
    UnsupportedSizeError,
)
from .models import PackedRecord, TryteRecord
from .utils import (
    SUPPORTED_TRIT_SIZES,
    group_count,
    packed_bits,
    packed_size,
    size_table,
    tryte_count,
)

__version__ = "0.1.0"

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
    # Alphabet
    "ALPHABET",
    "char_to_tryte",
    "tryte_to_char",
    # Records
    "TryteRecord",
    "PackedRecord",
    # Configuration
    "CodecConfig",
    # Exceptions
    "TrytepackError",
    "InvalidTryteValue",
    "SequenceLengthError",
    "UnsupportedSizeError",
    # Sizing
    "SUPPORTED_TRIT_SIZES",
    "group_count",
    "tryte_count",
    "packed_size",
    "packed_bits",
    "size_table",
    # Version
    "__version__",
]
