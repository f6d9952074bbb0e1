"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import random

import pytest

from trytepack import SUPPORTED_TRIT_SIZES, TryteSequence, tryte_sequence_type


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible sequences."""
    return random.Random(1234)


@pytest.fixture(params=SUPPORTED_TRIT_SIZES, ids=lambda size: f"T{size}")
def tryte_type(request: pytest.FixtureRequest) -> type[TryteSequence]:
    """Every registered tryte sequence type."""
    return tryte_sequence_type(request.param)
