"""Shared machinery for typed HTTP headers: raw value handling and base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

T = TypeVar("T")

RawInput = str | bytes | bytearray | Iterable[str | bytes | bytearray]


class HeaderError(ValueError):
    """Raised when a header value cannot be parsed."""


def normalize_raw(raw: RawInput) -> list[bytes]:
    """Turn a raw header value (one line or several) into a list of byte lines."""
    if isinstance(raw, str):
        return [raw.encode("utf-8")]
    if isinstance(raw, (bytes, bytearray)):
        return [bytes(raw)]
    lines = []
    for line in raw:
        if isinstance(line, str):
            lines.append(line.encode("utf-8"))
        elif isinstance(line, (bytes, bytearray)):
            lines.append(bytes(line))
        else:
            raise TypeError(f"raw header line must be str or bytes, not {type(line).__name__}")
    return lines


def _decode(line: bytes) -> str:
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HeaderError("header value is not valid UTF-8") from exc


def one_raw_str(raw: RawInput) -> str:
    """Return the single, non-empty line of a raw value, decoded and trimmed."""
    lines = normalize_raw(raw)
    if len(lines) != 1 or not lines[0]:
        raise HeaderError("expected exactly one non-empty header line")
    return _decode(lines[0]).strip()


def comma_delimited(raw: RawInput, parse: Callable[[str], T]) -> list[T]:
    """Split every line on commas and parse each non-empty item.

    Items that fail to parse are skipped; a line that is not UTF-8 is an error.
    """
    items: list[T] = []
    for line in normalize_raw(raw):
        for part in _decode(line).split(","):
            part = part.strip()
            if not part:
                continue
            try:
                items.append(parse(part))
            except ValueError:
                continue
    return items


def fmt_comma_delimited(items: Iterable[object]) -> str:
    """Join items with ", "."""
    return ", ".join(str(item) for item in items)


def _item_parser(item_type: Any) -> Callable[[str], Any]:
    return getattr(item_type, "from_str", item_type)


class Header(ABC):
    """A typed HTTP header with a wire name, a parser and a formatter."""

    name: ClassVar[str] = ""

    @classmethod
    @abstractmethod
    def from_str(cls, s: str) -> Header:
        """Build the header from its textual value."""
        raise HeaderError(f"{cls.__name__} cannot be parsed from text")

    @classmethod
    def parse_header(cls, raw: RawInput) -> Header:
        """Parse the header from a single raw line."""
        text = one_raw_str(raw)
        try:
            return cls.from_str(text)
        except HeaderError:
            raise
        except ValueError as exc:
            raise HeaderError(f"invalid {cls.name or cls.__name__} header: {text!r}") from exc

    def fmt_header(self) -> str:
        """Render the header as a full line, with line breaks in the value blanked."""
        value = str(self).replace("\r", " ").replace("\n", " ")
        return f"{self.name}: {value}\r\n"


@dataclass(frozen=True)
class TextHeader(Header):
    """A header whose value is a single opaque string."""

    value: str

    @classmethod
    def from_str(cls, s: str) -> TextHeader:
        return cls(s)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ListHeader(Header, Sequence):
    """A header holding a comma separated list of items."""

    item_type: ClassVar[Any] = str
    items: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def from_str(cls, s: str) -> ListHeader:
        return cls(comma_delimited(s, _item_parser(cls.item_type)))

    @classmethod
    def parse_header(cls, raw: RawInput) -> ListHeader:
        return cls(comma_delimited(raw, _item_parser(cls.item_type)))

    def __getitem__(self, index):
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __str__(self) -> str:
        return fmt_comma_delimited(self.items)


@dataclass(frozen=True)
class AnyOrListHeader(Header):
    """A header that is either "*" or a comma separated list of items.

    ``items`` is ``None`` for "*".
    """

    item_type: ClassVar[Any] = str
    items: tuple | None = None

    def __post_init__(self) -> None:
        if self.items is not None:
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def any(cls) -> AnyOrListHeader:
        """The "*" value, matching anything."""
        return cls(None)

    def is_any(self) -> bool:
        return self.items is None

    @classmethod
    def from_str(cls, s: str) -> AnyOrListHeader:
        return cls.parse_header(s)

    @classmethod
    def parse_header(cls, raw: RawInput) -> AnyOrListHeader:
        lines = normalize_raw(raw)
        if len(lines) == 1 and lines[0] == b"*":
            return cls.any()
        return cls(comma_delimited(lines, _item_parser(cls.item_type)))

    def __str__(self) -> str:
        if self.items is None:
            return "*"
        return fmt_comma_delimited(self.items)