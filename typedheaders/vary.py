"""The ``Vary`` header."""

from __future__ import annotations

import string
from dataclasses import dataclass

from .base import AnyOrListHeader

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(s: str) -> str:
    return s.translate(_ASCII_LOWER)


@dataclass(frozen=True, eq=False)
class FieldName:
    """A header field name, compared ASCII case-insensitively but shown as given."""

    value: str

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldName):
            other = other.value
        if isinstance(other, str):
            return _ascii_lower(self.value) == _ascii_lower(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(_ascii_lower(self.value))

    def __str__(self) -> str:
        return self.value


class Vary(AnyOrListHeader):
    """Either ``*`` or a list of request header field names."""

    name = "Vary"
    item_type = FieldName