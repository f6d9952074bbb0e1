"""Unit tests for pydantic interchange records."""

from __future__ import annotations

import pytest
from pydantic_core import ValidationError

from trytepack import (
    B48,
    T27,
    T243,
    PackedRecord,
    PackedSequence,
    SequenceLengthError,
    TryteRecord,
    TryteSequence,
)
from trytepack.codec.packer import encode_triple


class TestTryteRecord:
    """Test the tryte array record."""

    def test_valid(self) -> None:
        """Test a well-formed record."""
        record = TryteRecord(trit_size=27, trytes=list(range(9)))
        assert record.trytes == list(range(9))

    def test_json_roundtrip(self) -> None:
        """Test records serialize through JSON."""
        record = T243.from_human_readable("HELLO9WORLD").to_record()
        restored = TryteRecord.model_validate_json(record.model_dump_json())
        assert restored == record

    def test_value_out_of_range(self) -> None:
        """Test trytes are range checked."""
        with pytest.raises(ValidationError):
            TryteRecord(trit_size=27, trytes=[27] + [0] * 8)

    def test_wrong_length(self) -> None:
        """Test the array length must match the trit size."""
        with pytest.raises(ValidationError, match="need 9 trytes"):
            TryteRecord(trit_size=27, trytes=[0] * 8)

    def test_unsupported_size(self) -> None:
        """Test the trit size must be supported."""
        with pytest.raises(ValidationError):
            TryteRecord(trit_size=30, trytes=[0] * 10)

    def test_extra_field(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            TryteRecord(trit_size=27, trytes=[0] * 9, label="x")  # type: ignore[call-arg]

    def test_immutable(self) -> None:
        """Test records are frozen."""
        record = TryteRecord(trit_size=27, trytes=[0] * 9)
        with pytest.raises(ValidationError):
            record.trit_size = 81  # type: ignore[misc]


class TestPackedRecord:
    """Test the packed byte record."""

    def test_valid(self) -> None:
        """Test any byte values are accepted."""
        record = PackedRecord(trit_size=27, data=b"\xff" * 6)
        assert len(record.data) == 6

    def test_wrong_length(self) -> None:
        """Test the byte count must match the trit size."""
        with pytest.raises(ValidationError, match="need 6 bytes"):
            PackedRecord(trit_size=27, data=b"\x00" * 4)

    def test_json_roundtrip_high_bytes(self) -> None:
        """Test packed bytes above 0x7f survive JSON."""
        b0, b1 = encode_triple(0, 0, 26)
        assert b1 >= 0x80
        packed = T27.from_tryte_array([0, 0, 26, 26, 26, 26, 0, 0, 0]).encode()
        record = packed.to_record()

        payload = record.model_dump_json()
        restored = PackedRecord.model_validate_json(payload)
        assert restored == record
        assert restored.data[:2] == bytes([b0, b1])
        assert PackedSequence.from_record(restored) == packed


class TestSequenceConversion:
    """Test sequence <-> record conversion."""

    def test_tryte_roundtrip(self) -> None:
        """Test to_record/from_record on a sized class."""
        seq = T27.from_human_readable("AB9C")
        assert T27.from_record(seq.to_record()) == seq

    def test_tryte_base_dispatch(self) -> None:
        """Test the base class picks the type from the record."""
        record = TryteRecord(trit_size=243, trytes=[1] * 81)
        seq = TryteSequence.from_record(record)
        assert isinstance(seq, T243)

    def test_size_mismatch(self) -> None:
        """Test a sized class rejects a record of another size."""
        record = TryteRecord(trit_size=243, trytes=[0] * 81)
        with pytest.raises(SequenceLengthError, match="holds 27 trits"):
            T27.from_record(record)

    def test_packed_roundtrip(self) -> None:
        """Test packed sequences convert through records."""
        packed = T27.from_human_readable("ZZZ").encode()
        record = packed.to_record()
        assert record.data == packed.to_bytes()
        restored = PackedSequence.from_record(record)
        assert isinstance(restored, B48)
        assert restored == packed
