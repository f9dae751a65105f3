"""Headers whose value is carried as one opaque string."""

from __future__ import annotations

from .base import TextHeader


class Location(TextHeader):
    """The ``Location`` header: a URI reference for the response's target."""

    name = "Location"


class Referer(TextHeader):
    """The ``Referer`` header: the URI the request target was obtained from."""

    name = "Referer"


class Server(TextHeader):
    """The ``Server`` header: software used by the origin server."""

    name = "Server"


class UserAgent(TextHeader):
    """The ``User-Agent`` header: the client software; the value is not split."""

    name = "User-Agent"