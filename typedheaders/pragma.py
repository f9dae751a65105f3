"""The HTTP/1.0 ``Pragma`` header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import Header, RawInput, one_raw_str

_NO_CACHE = "no-cache"


@dataclass(frozen=True)
class Pragma(Header):
    """Either ``no-cache`` (``extension`` is ``None``) or any other value."""

    name: ClassVar[str] = "Pragma"
    extension: str | None = None

    @classmethod
    def no_cache(cls) -> Pragma:
        return cls(None)

    @classmethod
    def ext(cls, value: str) -> Pragma:
        return cls(value)

    def is_no_cache(self) -> bool:
        return self.extension is None

    @classmethod
    def from_str(cls, s: str) -> Pragma:
        if s.isascii() and s.lower() == _NO_CACHE:
            return cls.no_cache()
        return cls.ext(s)

    @classmethod
    def parse_header(cls, raw: RawInput) -> Pragma:
        return cls.from_str(one_raw_str(raw))

    def __str__(self) -> str:
        return _NO_CACHE if self.extension is None else self.extension