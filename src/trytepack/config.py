"""Codec configuration.

This module provides the configuration dataclass shared by the CLI and by
callers that want one place to choose a sequence size, ingress validation
and a reproducible random source.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from .codec.sequence import PackedSequence, TryteSequence, packed_sequence_type, tryte_sequence_type
from .utils.sizing import SUPPORTED_TRIT_SIZES


@dataclass
class CodecConfig:
    """Configuration for building and packing tryte sequences.

    Attributes:
        trit_size: Sequence size in trits (default 243).
            One of 27, 81, 243 or 721.

        strict: Validate trytes at ingress (default False).
            When False, out-of-range trytes and non-alphabet characters pass
            through unchecked and wrap like byte arithmetic.

        seed: Seed for make_rng() (default None, OS entropy).

    Examples:
        ```python
        from trytepack.config import CodecConfig

        config = CodecConfig(trit_size=81, strict=True, seed=7)
        seq = config.tryte_type.random(config.make_rng())
        packed = seq.encode()
        ```
    """

    trit_size: int = 243
    strict: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.trit_size not in SUPPORTED_TRIT_SIZES:
            raise ValueError(
                f"trit_size must be one of {SUPPORTED_TRIT_SIZES}, got {self.trit_size}"
            )

    @property
    def tryte_type(self) -> type[TryteSequence]:
        return tryte_sequence_type(self.trit_size)

    @property
    def packed_type(self) -> type[PackedSequence]:
        return packed_sequence_type(self.trit_size)

    def make_rng(self) -> random.Random:
        """Create a random source, seeded when seed is set."""
        return random.Random(self.seed)
