"""The ``Strict-Transport-Security`` header."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from .base import Header, HeaderError

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _eq_ascii(s: str, target: str) -> bool:
    return s.isascii() and s.lower() == target.lower()


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise HeaderError(f"invalid max-age: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise HeaderError(f"max-age out of range: {text!r}")
    return value


@dataclass(frozen=True)
class StrictTransportSecurity(Header):
    """An HSTS policy: how long it lasts and whether it covers subdomains."""

    name: ClassVar[str] = "Strict-Transport-Security"
    max_age: int
    include_subdomains: bool = False

    @classmethod
    def including_subdomains(cls, max_age: int) -> StrictTransportSecurity:
        return cls(max_age=max_age, include_subdomains=True)

    @classmethod
    def excluding_subdomains(cls, max_age: int) -> StrictTransportSecurity:
        return cls(max_age=max_age, include_subdomains=False)

    @classmethod
    def from_str(cls, s: str) -> StrictTransportSecurity:
        max_age: int | None = None
        subdomains = False
        for directive in (part.strip() for part in s.split(";")):
            if _eq_ascii(directive, "includeSubdomains"):
                if subdomains:
                    raise HeaderError("duplicate includeSubdomains directive")
                subdomains = True
                continue
            left, sep, right = directive.partition("=")
            if sep and _eq_ascii(left.strip(), "max-age"):
                age = _parse_u64(right.strip().strip('"'))
                if max_age is not None:
                    raise HeaderError("duplicate max-age directive")
                max_age = age
        if max_age is None:
            raise HeaderError("missing max-age directive")
        return cls(max_age=max_age, include_subdomains=subdomains)

    @classmethod
    def parse_header(cls, raw) -> StrictTransportSecurity:
        return super().parse_header(raw)

    def __str__(self) -> str:
        if self.include_subdomains:
            return f"max-age={self.max_age}; includeSubdomains"
        return f"max-age={self.max_age}"