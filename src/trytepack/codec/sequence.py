"""Fixed-size tryte and packed sequences.

Each supported trit size N has a pair of types: a tryte sequence holding
N // 9 T9 groups and a packed sequence holding N // 9 B16 groups. Both are
immutable; position is the only identity a group has, and group order is
kept identical across every representation (string, raw array, tryte
sequence, packed sequence, bytes).

Concrete types register themselves by trit size when subclassed, and can be
looked up again by size:

    >>> tryte_sequence_type(243)
    <class 'trytepack.codec.sequence.T243'>
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import ClassVar, TypeVar

from ..alphabet import ZERO_CHAR, tryte_to_char
from ..exceptions import InvalidTryteValue, SequenceLengthError, UnsupportedSizeError
from ..models import PackedRecord, TryteRecord
from ..utils.sizing import check_trit_size, group_count, packed_size, tryte_count
from .packer import B16, T9, TRYTE_BASE

logger = logging.getLogger(__name__)

TS = TypeVar("TS", bound="TryteSequence")
PS = TypeVar("PS", bound="PackedSequence")

# Global registries: trit_size -> sequence class
TRYTE_SEQUENCE_REGISTRY: dict[int, type[TryteSequence]] = {}
PACKED_SEQUENCE_REGISTRY: dict[int, type[PackedSequence]] = {}


def tryte_sequence_type(trit_size: int) -> type[TryteSequence]:
    """Look up the tryte sequence class for a trit size.

    Raises:
        UnsupportedSizeError: If no class is registered for trit_size
    """
    try:
        return TRYTE_SEQUENCE_REGISTRY[trit_size]
    except KeyError:
        check_trit_size(trit_size)
        raise UnsupportedSizeError(f"No tryte sequence registered for {trit_size} trits") from None


def packed_sequence_type(trit_size: int) -> type[PackedSequence]:
    """Look up the packed sequence class for a trit size.

    Raises:
        UnsupportedSizeError: If no class is registered for trit_size
    """
    try:
        return PACKED_SEQUENCE_REGISTRY[trit_size]
    except KeyError:
        check_trit_size(trit_size)
        raise UnsupportedSizeError(f"No packed sequence registered for {trit_size} trits") from None


def _register(registry: dict[int, type], cls: type, trit_size: int) -> None:
    check_trit_size(trit_size)
    existing = registry.get(trit_size)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Trit size {trit_size} already registered to {existing.__name__}. "
            f"Cannot register {cls.__name__} with the same size."
        )
    registry[trit_size] = cls


class _FixedSequence:
    """Shared storage and container protocol for both sequence kinds."""

    trit_size: ClassVar[int]
    group_type: ClassVar[type]

    __slots__ = ("_groups",)

    def __init__(self, groups: Iterable) -> None:
        expected = self.group_count()
        groups = tuple(groups)
        for index, group in enumerate(groups):
            if not isinstance(group, self.group_type):
                raise TypeError(
                    f"Group {index} of {type(self).__name__} must be {self.group_type.__name__}, "
                    f"got {type(group).__name__}"
                )
        if len(groups) != expected:
            raise SequenceLengthError(
                f"{type(self).__name__} needs {expected} groups, got {len(groups)}"
            )
        self._groups = groups

    @classmethod
    def sized_trit_size(cls) -> int:
        """Return trit_size, or raise TypeError on an unsized base class."""
        try:
            return cls.trit_size
        except AttributeError:
            raise TypeError(f"{cls.__name__} has no trit size; use a sized subclass") from None

    @classmethod
    def group_count(cls) -> int:
        return group_count(cls.sized_trit_size())

    @property
    def groups(self) -> tuple:
        return self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator:
        return iter(self._groups)

    def __getitem__(self, index: int):
        return self._groups[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._groups == other._groups  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._groups))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._groups)!r})"


class TryteSequence(_FixedSequence):
    """Fixed-length sequence of tryte-triples representing trit_size trits.

    Subclass with a ``trit_size`` keyword to define a concrete size.
    """

    group_type = T9

    __slots__ = ()

    def __init_subclass__(cls, trit_size: int | None = None, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if trit_size is not None:
            cls.trit_size = trit_size
            _register(TRYTE_SEQUENCE_REGISTRY, cls, trit_size)

    @classmethod
    def tryte_count(cls) -> int:
        return tryte_count(cls.sized_trit_size())

    @classmethod
    def packed_type(cls) -> type[PackedSequence]:
        return packed_sequence_type(cls.sized_trit_size())

    def encode(self) -> PackedSequence:
        """Pack every group, keeping group order."""
        return self.packed_type()(t9.encode() for t9 in self._groups)

    @classmethod
    def from_tryte_array(cls: type[TS], raw: Sequence[int], *, strict: bool = False) -> TS:
        """Regroup a flat tryte array into triples positionally.

        Args:
            raw: Exactly tryte_count() integers; raw[3i:3i+3] becomes group i
            strict: Reject values outside 0-26

        Raises:
            SequenceLengthError: If raw has the wrong length
            InvalidTryteValue: If strict and a value is out of range
        """
        expected = cls.tryte_count()
        if len(raw) != expected:
            raise SequenceLengthError(
                f"{cls.__name__} needs {expected} trytes, got {len(raw)}"
            )
        if strict:
            for index, value in enumerate(raw):
                if not 0 <= value < TRYTE_BASE:
                    raise InvalidTryteValue(
                        f"Tryte {index} has value {value}, expected 0-{TRYTE_BASE - 1}"
                    )

        logger.debug("Building %s from %d raw trytes", cls.__name__, len(raw))
        return cls(T9(raw[i], raw[i + 1], raw[i + 2]) for i in range(0, expected, 3))

    @classmethod
    def from_human_readable(cls: type[TS], s: str, *, strict: bool = False) -> TS:
        """Parse a human-readable string, 3 characters per group.

        Short input is right-padded with '9' (zero trytes); characters beyond
        tryte_count() are ignored.

        Args:
            s: String over the alphabet '9', 'A'-'Z'
            strict: Reject characters outside the alphabet

        Raises:
            InvalidTryteValue: If strict and s contains a non-alphabet character

        Example:
            >>> T27.from_human_readable("AB9C").as_tryte_array()
            [1, 2, 0, 3, 0, 0, 0, 0, 0]
        """
        expected = cls.tryte_count()
        if len(s) > expected:
            logger.debug("Ignoring %d characters beyond %s capacity", len(s) - expected, cls.__name__)
        chars = s[:expected].ljust(expected, ZERO_CHAR)
        return cls(
            T9.from_human_readable(chars[i], chars[i + 1], chars[i + 2], strict=strict)
            for i in range(0, expected, 3)
        )

    @classmethod
    def random(cls: type[TS], rng: random.Random | None = None) -> TS:
        """Draw every tryte independently and uniformly from 0-26.

        Args:
            rng: Random source; a fresh OS-seeded one is used when omitted.
                Not suitable for cryptographic use.
        """
        if rng is None:
            rng = random.Random()
        return cls.from_tryte_array([rng.randrange(TRYTE_BASE) for _ in range(cls.tryte_count())])

    @classmethod
    def zeros(cls: type[TS]) -> TS:
        return cls(T9(0, 0, 0) for _ in range(cls.group_count()))

    def as_tryte_array(self) -> list[int]:
        """Flatten to tryte_count() integers in group order."""
        return [tryte for t9 in self._groups for tryte in t9.as_tuple()]

    def to_human_readable(self) -> str:
        """Render every tryte with the alphabet.

        Raises:
            InvalidTryteValue: If a tryte is outside 0-26
        """
        return "".join(tryte_to_char(tryte) for tryte in self.as_tryte_array())

    def to_record(self) -> TryteRecord:
        return TryteRecord(trit_size=self.trit_size, trytes=self.as_tryte_array())

    @classmethod
    def from_record(cls, record: TryteRecord) -> TryteSequence:
        """Build the sequence matching the record's trit size.

        Called on the base class the size comes from the record; called on a
        sized subclass the sizes must agree.
        """
        target = _resolve(cls, record.trit_size, tryte_sequence_type)
        return target.from_tryte_array(record.trytes)


class PackedSequence(_FixedSequence):
    """Fixed-length sequence of packed byte pairs representing trit_size trits.

    Subclass with a ``trit_size`` keyword to define a concrete size.
    """

    group_type = B16

    __slots__ = ()

    def __init_subclass__(cls, trit_size: int | None = None, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if trit_size is not None:
            cls.trit_size = trit_size
            _register(PACKED_SEQUENCE_REGISTRY, cls, trit_size)

    @classmethod
    def byte_count(cls) -> int:
        return packed_size(cls.sized_trit_size())

    @classmethod
    def tryte_type(cls) -> type[TryteSequence]:
        return tryte_sequence_type(cls.sized_trit_size())

    def decode(self) -> TryteSequence:
        """Unpack every group, keeping group order."""
        return self.tryte_type()(b16.decode() for b16 in self._groups)

    def to_bytes(self) -> bytes:
        """Serialize as b0, b1 of group 0, then group 1, and so on."""
        return bytes(byte for b16 in self._groups for byte in b16.as_tuple())

    @classmethod
    def from_bytes(cls: type[PS], data: bytes) -> PS:
        """Parse the packed byte-pair format.

        Byte values are not range-checked.

        Raises:
            SequenceLengthError: If data is not exactly byte_count() bytes
        """
        expected = cls.byte_count()
        if len(data) != expected:
            raise SequenceLengthError(f"{cls.__name__} needs {expected} bytes, got {len(data)}")

        logger.debug("Building %s from %d bytes", cls.__name__, len(data))
        return cls(B16(data[i], data[i + 1]) for i in range(0, expected, 2))

    def to_record(self) -> PackedRecord:
        return PackedRecord(trit_size=self.trit_size, data=self.to_bytes())

    @classmethod
    def from_record(cls, record: PackedRecord) -> PackedSequence:
        """Build the packed sequence matching the record's trit size."""
        target = _resolve(cls, record.trit_size, packed_sequence_type)
        return target.from_bytes(record.data)


def _resolve(cls: type, trit_size: int, lookup: Callable[[int], type]) -> type:
    if hasattr(cls, "trit_size"):
        if cls.trit_size != trit_size:
            raise SequenceLengthError(
                f"{cls.__name__} holds {cls.trit_size} trits, record holds {trit_size}"
            )
        return cls
    return lookup(trit_size)


class T27(TryteSequence, trit_size=27):
    """27 trits: 3 groups, 9 trytes."""

    __slots__ = ()


class T81(TryteSequence, trit_size=81):
    """81 trits: 9 groups, 27 trytes."""

    __slots__ = ()


class T243(TryteSequence, trit_size=243):
    """243 trits: 27 groups, 81 trytes."""

    __slots__ = ()


class T721(TryteSequence, trit_size=721):
    """721 trits: 80 groups, 240 trytes."""

    __slots__ = ()


class B48(PackedSequence, trit_size=27):
    """Packed T27: 3 byte pairs."""

    __slots__ = ()


class B144(PackedSequence, trit_size=81):
    """Packed T81: 9 byte pairs."""

    __slots__ = ()


class B432(PackedSequence, trit_size=243):
    """Packed T243: 27 byte pairs."""

    __slots__ = ()


class B1296(PackedSequence, trit_size=721):
    """Packed T721: 80 byte pairs."""

    __slots__ = ()
