"""Pydantic interchange records for tryte and packed sequences.

These records are the validated edge of the codec: building a record checks
the trit size, the array length and (for trytes) the value range. The
sequence types themselves stay unchecked.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .utils.sizing import packed_size, tryte_count

TritSize = Literal[27, 81, 243, 721]
Tryte = Annotated[int, Field(ge=0, le=26)]


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    trit_size: TritSize


class TryteRecord(_Record):
    """Flat tryte array of one sequence.

    Example:
        >>> TryteRecord(trit_size=27, trytes=[0] * 9)
        TryteRecord(trit_size=27, trytes=[0, 0, 0, 0, 0, 0, 0, 0, 0])
    """

    trytes: list[Tryte]

    @model_validator(mode="after")
    def check_length(self) -> TryteRecord:
        expected = tryte_count(self.trit_size)
        if len(self.trytes) != expected:
            raise ValueError(
                f"{self.trit_size} trits need {expected} trytes, got {len(self.trytes)}"
            )
        return self


class PackedRecord(_Record):
    """Packed byte-pair form of one sequence.

    Byte values are not range-checked; decoding accepts any byte pair.
    """

    model_config = ConfigDict(
        # Packed bytes exceed 0x7f, so JSON carries them as base64
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    data: bytes

    @model_validator(mode="after")
    def check_length(self) -> PackedRecord:
        expected = packed_size(self.trit_size)
        if len(self.data) != expected:
            raise ValueError(f"{self.trit_size} trits need {expected} bytes, got {len(self.data)}")
        return self
