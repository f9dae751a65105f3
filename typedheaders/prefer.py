"""The ``Prefer`` and ``Preference-Applied`` headers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .base import HeaderError, ListHeader, RawInput

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class PreferenceError(ValueError):
    """Raised when a single preference cannot be parsed."""


def _parse_u32(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise PreferenceError(f"invalid wait value: {text!r}")
    seconds = int(text)
    if seconds > _U32_MAX:
        raise PreferenceError(f"wait value out of range: {text!r}")
    return seconds


@dataclass(frozen=True)
class Preference:
    """One preference: a token with an optional value and parameters.

    Registered preferences (``respond-async``, ``return``, ``handling`` and
    ``wait``) never carry parameters; extensions may.
    """

    name: str
    value: str = ""
    params: tuple[tuple[str, str], ...] = ()
    registered: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "params", tuple((str(k), str(v)) for k, v in self.params)
        )

    @classmethod
    def respond_async(cls) -> Preference:
        return cls("respond-async", "", (), True)

    @classmethod
    def return_representation(cls) -> Preference:
        return cls("return", "representation", (), True)

    @classmethod
    def return_minimal(cls) -> Preference:
        return cls("return", "minimal", (), True)

    @classmethod
    def handling_strict(cls) -> Preference:
        return cls("handling", "strict", (), True)

    @classmethod
    def handling_lenient(cls) -> Preference:
        return cls("handling", "lenient", (), True)

    @classmethod
    def wait(cls, seconds: int) -> Preference:
        if not 0 <= seconds <= _U32_MAX:
            raise PreferenceError(f"wait value out of range: {seconds}")
        return cls("wait", str(seconds), (), True)

    @classmethod
    def extension(
        cls, name: str, value: str, params: Iterable[tuple[str, str]] = ()
    ) -> Preference:
        return cls(name, value, tuple(params), False)

    @property
    def seconds(self) -> int | None:
        """The delay of a ``wait`` preference, otherwise ``None``."""
        if self.registered and self.name == "wait":
            return int(self.value)
        return None

    @classmethod
    def from_str(cls, s: str) -> Preference:
        pieces = []
        for part in s.split(";"):
            name, sep, value = part.partition("=")
            pieces.append((name.strip(), value.strip().strip('"') if sep else ""))
        (name, value), rest = pieces[0], pieces[1:]

        fixed = _FIXED.get((name, value))
        if fixed is not None:
            if rest:
                raise PreferenceError(f"{name} takes no parameters")
            return fixed
        if name == "wait":
            if rest:
                raise PreferenceError("wait takes no parameters")
            return cls.wait(_parse_u32(value))
        return cls.extension(name, value, rest)

    def without_params(self) -> Preference:
        """The same preference with any parameters dropped."""
        if not self.params:
            return self
        return Preference(self.name, self.value, (), self.registered)

    def __str__(self) -> str:
        parts = [f"{self.name}={self.value}" if self.value else self.name]
        parts.extend(f"{k}={v}" if v else k for k, v in self.params)
        return "; ".join(parts)


_FIXED = {
    (p.name, p.value): p
    for p in (
        Preference.respond_async(),
        Preference.return_representation(),
        Preference.return_minimal(),
        Preference.handling_strict(),
        Preference.handling_lenient(),
    )
}


class Prefer(ListHeader):
    """The ``Prefer`` header: one or more preferences requested of the server."""

    name = "Prefer"
    item_type = Preference

    @classmethod
    def from_str(cls, s: str) -> Prefer:
        return cls.parse_header(s)

    @classmethod
    def parse_header(cls, raw: RawInput) -> Prefer:
        header = super().parse_header(raw)
        if not header.items:
            raise HeaderError(f"{cls.name} header holds no preferences")
        return header


class PreferenceApplied(Prefer):
    """The ``Preference-Applied`` header; parameters are never written out."""

    name = "Preference-Applied"

    @classmethod
    def parse_header(cls, raw: RawInput) -> PreferenceApplied:
        return super().parse_header(raw)

    def __str__(self) -> str:
        return ", ".join(str(p.without_params()) for p in self.items)