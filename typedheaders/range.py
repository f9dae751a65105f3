"""The ``Range`` header and the byte range specifications it carries."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .base import Header, HeaderError, RawInput

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_BYTES_UNIT = "bytes"


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise HeaderError(f"invalid byte position: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise HeaderError(f"byte position out of range: {text!r}")
    return value


def _check_u64(value: int) -> int:
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"byte position out of range: {value}")
    return value


class ByteRangeKind(Enum):
    """The three shapes a byte range specification can take."""

    FROM_TO = "from-to"
    ALL_FROM = "all-from"
    LAST = "last"


@dataclass(frozen=True)
class ByteRangeSpec:
    """One byte range: ``x-y``, ``x-`` or ``-n``.

    For ``LAST`` the suffix length is held in ``start``.
    """

    kind: ByteRangeKind
    start: int
    end: int | None = None

    @classmethod
    def from_to(cls, start: int, end: int) -> ByteRangeSpec:
        """All bytes from ``start`` to ``end``, both inclusive."""
        return cls(ByteRangeKind.FROM_TO, _check_u64(start), _check_u64(end))

    @classmethod
    def all_from(cls, start: int) -> ByteRangeSpec:
        """All bytes from ``start`` to the end."""
        return cls(ByteRangeKind.ALL_FROM, _check_u64(start))

    @classmethod
    def last(cls, length: int) -> ByteRangeSpec:
        """The last ``length`` bytes."""
        return cls(ByteRangeKind.LAST, _check_u64(length))

    @classmethod
    def from_str(cls, s: str) -> ByteRangeSpec:
        first, sep, second = s.partition("-")
        if not sep:
            raise HeaderError(f"invalid byte range: {s!r}")
        if first == "":
            return cls.last(_parse_u64(second))
        if second == "":
            return cls.all_from(_parse_u64(first))
        start, end = _parse_u64(first), _parse_u64(second)
        if start > end:
            raise HeaderError(f"byte range ends before it starts: {s!r}")
        return cls.from_to(start, end)

    def to_satisfiable_range(self, full_length: int) -> tuple[int, int] | None:
        """Clamp this range to an entity of ``full_length`` bytes.

        Returns an end-inclusive ``(first, last)`` pair with
        ``0 <= first <= last < full_length``, or ``None`` if unsatisfiable.
        """
        if full_length == 0:
            return None
        if self.kind is ByteRangeKind.FROM_TO:
            assert self.end is not None
            if self.start < full_length and self.start <= self.end:
                return self.start, min(self.end, full_length - 1)
            return None
        if self.kind is ByteRangeKind.ALL_FROM:
            if self.start < full_length:
                return self.start, full_length - 1
            return None
        suffix = self.start
        if suffix == 0:
            return None
        if suffix > full_length:
            return 0, full_length - 1
        return full_length - suffix, full_length - 1

    def __str__(self) -> str:
        if self.kind is ByteRangeKind.FROM_TO:
            return f"{self.start}-{self.end}"
        if self.kind is ByteRangeKind.ALL_FROM:
            return f"{self.start}-"
        return f"-{self.start}"


def _parse_specs(text: str) -> list[ByteRangeSpec]:
    specs = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            specs.append(ByteRangeSpec.from_str(part))
        except ValueError:
            continue
    return specs


@dataclass(frozen=True)
class Range(Header):
    """A ``Range`` value: byte ranges, or an unregistered unit with its raw set.

    ``range_str`` is ``None`` for byte ranges, which are held in ``specs``.
    """

    name: ClassVar[str] = "Range"
    unit: str = _BYTES_UNIT
    specs: tuple[ByteRangeSpec, ...] = ()
    range_str: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "specs", tuple(self.specs))

    @classmethod
    def bytes(cls, start: int, end: int) -> Range:
        """The common single range ``bytes=start-end``."""
        return cls(specs=(ByteRangeSpec.from_to(start, end),))

    @classmethod
    def bytes_multi(cls, ranges: Iterable[tuple[int, int]]) -> Range:
        """Several ``start-end`` byte ranges."""
        return cls(specs=tuple(ByteRangeSpec.from_to(s, e) for s, e in ranges))

    @classmethod
    def unregistered(cls, unit: str, range_str: str) -> Range:
        """A range in a unit other than bytes, kept as text."""
        return cls(unit=unit, range_str=range_str)

    @property
    def is_bytes(self) -> bool:
        return self.range_str is None

    @classmethod
    def from_str(cls, s: str) -> Range:
        unit, sep, rest = s.partition("=")
        if not sep:
            raise HeaderError(f"invalid range: {s!r}")
        if unit == _BYTES_UNIT:
            specs = _parse_specs(rest)
            if not specs:
                raise HeaderError(f"no valid byte ranges in {s!r}")
            return cls(specs=specs)
        if unit and rest:
            return cls.unregistered(unit, rest)
        raise HeaderError(f"invalid range: {s!r}")

    @classmethod
    def parse_header(cls, raw: RawInput) -> Range:
        return super().parse_header(raw)

    def __str__(self) -> str:
        if self.range_str is None:
            return f"{self.unit}=" + ",".join(str(spec) for spec in self.specs)
        return f"{self.unit}={self.range_str}"