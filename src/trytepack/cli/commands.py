"""CLI command implementations."""

from __future__ import annotations

import logging

from ..config import CodecConfig
from ..utils.sizing import size_table

logger = logging.getLogger(__name__)


def encode_text(text: str, config: CodecConfig) -> str:
    """Pack a human-readable string and return the packed bytes as hex.

    Args:
        text: String over the alphabet '9', 'A'-'Z'
        config: Sequence size and validation settings

    Returns:
        Lowercase hex of the packed byte-pair format
    """
    logger.debug("Encoding %d characters as %d trits", len(text), config.trit_size)
    seq = config.tryte_type.from_human_readable(text, strict=config.strict)
    return seq.encode().to_bytes().hex()


def decode_hex(hex_data: str, config: CodecConfig) -> str:
    """Unpack hex of the packed byte-pair format to a human-readable string.

    Raises:
        ValueError: If hex_data is not valid hex
        SequenceLengthError: If the byte count does not match the size
        InvalidTryteValue: If a decoded tryte has no alphabet character
    """
    data = bytes.fromhex(hex_data)
    logger.debug("Decoding %d bytes as %d trits", len(data), config.trit_size)
    return config.packed_type.from_bytes(data).decode().to_human_readable()


def random_text(config: CodecConfig) -> str:
    """Generate a random sequence and return it human-readable."""
    return config.tryte_type.random(config.make_rng()).to_human_readable()


def print_sizes() -> None:
    """Print the size table for every supported trit count."""
    print("|" * 7, "trytepack: Compact Tryte Codec", "|" * 7)
    print(f"{'trits':>6} {'groups':>7} {'trytes':>7} {'bytes':>6} {'bits':>6}")
    for trit_size, sizes in size_table().items():
        print(
            f"{trit_size:>6} {sizes['groups']:>7} {sizes['trytes']:>7} "
            f"{sizes['bytes']:>6} {sizes['bits']:>6}"
        )
    print()

    # Packed bytes vs one byte per tryte
    print("Packed size: 2 bytes per 3 trytes (2/3 of one byte per tryte)")
