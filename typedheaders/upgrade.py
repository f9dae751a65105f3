"""The ``Upgrade`` header and the protocols it lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import ListHeader


@dataclass(frozen=True)
class ProtocolName:
    """A protocol identifier; names are case-sensitive except ``websocket``."""

    HTTP: ClassVar[ProtocolName]
    TLS: ClassVar[ProtocolName]
    WEBSOCKET: ClassVar[ProtocolName]
    H2C: ClassVar[ProtocolName]

    value: str
    registered: bool = False

    @classmethod
    def unregistered(cls, name: str) -> ProtocolName:
        return cls(name, False)

    @classmethod
    def from_str(cls, s: str) -> ProtocolName:
        known = {"HTTP": cls.HTTP, "TLS": cls.TLS, "h2c": cls.H2C}
        if s in known:
            return known[s]
        if s.isascii() and s.lower() == "websocket":
            return cls.WEBSOCKET
        return cls.unregistered(s)

    def __str__(self) -> str:
        return self.value


ProtocolName.HTTP = ProtocolName("HTTP", True)
ProtocolName.TLS = ProtocolName("TLS", True)
ProtocolName.WEBSOCKET = ProtocolName("websocket", True)
ProtocolName.H2C = ProtocolName("h2c", True)


@dataclass(frozen=True)
class Protocol:
    """A protocol name with an optional version, written ``name/version``."""

    name: ProtocolName
    version: str | None = None

    @classmethod
    def from_str(cls, s: str) -> Protocol:
        name, sep, version = s.partition("/")
        return cls(ProtocolName.from_str(name), version if sep else None)

    def __str__(self) -> str:
        if self.version is None:
            return str(self.name)
        return f"{self.name}/{self.version}"


class Upgrade(ListHeader):
    """The ``Upgrade`` header: protocols in descending preference."""

    name = "Upgrade"
    item_type = Protocol