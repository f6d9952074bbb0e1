"""Utility functions for trytepack.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import (
    SUPPORTED_TRIT_SIZES,
    check_trit_size,
    group_count,
    packed_bits,
    packed_size,
    size_table,
    tryte_count,
)

__all__ = [
    "SUPPORTED_TRIT_SIZES",
    "check_trit_size",
    "group_count",
    "tryte_count",
    "packed_size",
    "packed_bits",
    "size_table",
]
