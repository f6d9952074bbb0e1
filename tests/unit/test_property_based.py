"""Property-based tests using hypothesis."""

from __future__ import annotations

import random

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from trytepack import SUPPORTED_TRIT_SIZES, packed_sequence_type, tryte_sequence_type
from trytepack.alphabet import ALPHABET
from trytepack.codec.packer import decode_pair, encode_triple

trytes = st.integers(min_value=0, max_value=26)
trit_sizes = st.sampled_from(SUPPORTED_TRIT_SIZES)


@st.composite
def raw_arrays(draw: st.DrawFn) -> tuple[int, list[int]]:
    """Draw a trit size and a valid raw tryte array for it."""
    trit_size = draw(trit_sizes)
    n = tryte_sequence_type(trit_size).tryte_count()
    return trit_size, draw(st.lists(trytes, min_size=n, max_size=n))


class TestPackerProperties:
    """Property-based tests for the elementary packer."""

    @given(t0=trytes, t1=trytes, t2=trytes)
    def test_roundtrip(self, t0: int, t1: int, t2: int) -> None:
        """Test decode inverts encode."""
        assert decode_pair(*encode_triple(t0, t1, t2)) == (t0, t1, t2)

    @given(b0=st.integers(0, 255), b1=st.integers(0, 255))
    def test_decode_total(self, b0: int, b1: int) -> None:
        """Test decode accepts every byte pair."""
        t0, t1, _ = decode_pair(b0, b1)
        assert 0 <= t0 <= 26
        assert 0 <= t1 <= 26


class TestSequenceProperties:
    """Property-based tests for sequences."""

    @settings(suppress_health_check=[HealthCheck.large_base_example, HealthCheck.too_slow])
    @given(case=raw_arrays())
    def test_sequence_roundtrip(self, case: tuple[int, list[int]]) -> None:
        """Test decode(encode(from_tryte_array(raw))).as_tryte_array() == raw."""
        trit_size, raw = case
        seq_type = tryte_sequence_type(trit_size)
        assert seq_type.from_tryte_array(raw).encode().decode().as_tryte_array() == raw

    @settings(suppress_health_check=[HealthCheck.large_base_example, HealthCheck.too_slow])
    @given(case=raw_arrays())
    def test_bytes_roundtrip(self, case: tuple[int, list[int]]) -> None:
        """Test packed bytes parse back to the same tryte array."""
        trit_size, raw = case
        data = tryte_sequence_type(trit_size).from_tryte_array(raw).encode().to_bytes()
        packed = packed_sequence_type(trit_size).from_bytes(data)
        assert packed.decode().as_tryte_array() == raw

    @given(trit_size=trit_sizes, text=st.text(alphabet=ALPHABET, max_size=300))
    def test_human_readable_prefix(self, trit_size: int, text: str) -> None:
        """Test rendering returns the input, truncated and padded with '9'."""
        seq_type = tryte_sequence_type(trit_size)
        n = seq_type.tryte_count()
        rendered = seq_type.from_human_readable(text).to_human_readable()
        assert rendered == text[:n].ljust(n, "9")

    @given(trit_size=trit_sizes, seed=st.integers())
    def test_random_roundtrip(self, trit_size: int, seed: int) -> None:
        """Test seeded random sequences stay in range and round-trip."""
        seq = tryte_sequence_type(trit_size).random(random.Random(seed))
        assert all(0 <= t <= 26 for t in seq.as_tryte_array())
        assert seq.encode().decode() == seq
