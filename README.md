# typedheaders

Typed values for common HTTP headers. Every header class knows its wire name
(`name`), parses raw header lines into a Python object with `parse_header`,
and turns that object back into text: `str(header)` gives the value and
`header.fmt_header()` gives the whole line, `Name: value\r\n`.

Raw input to `parse_header` may be a `str`, `bytes`, or an iterable of them
(one item per header line).

## Installation

```
pip install typedheaders
```

It has no runtime dependencies.

## Headers covered

| Module                  | Classes                                             |
|-------------------------|-----------------------------------------------------|
| `typedheaders.text`     | `Location`, `Referer`, `Server`, `UserAgent`        |
| `typedheaders.pragma`   | `Pragma`                                            |
| `typedheaders.vary`     | `Vary`, `FieldName`                                 |
| `typedheaders.upgrade`  | `Upgrade`, `Protocol`, `ProtocolName`               |
| `typedheaders.prefer`   | `Prefer`, `PreferenceApplied`, `Preference`         |
| `typedheaders.hsts`     | `StrictTransportSecurity`                           |
| `typedheaders.range`    | `Range`, `ByteRangeSpec`                            |

`typedheaders.base` holds the base classes (`Header`, `TextHeader`,
`ListHeader`, `AnyOrListHeader`), the helpers `normalize_raw`, `one_raw_str`,
`comma_delimited` and `fmt_comma_delimited`, and `HeaderError`, which is
raised (a `ValueError` subclass) when a value cannot be parsed.

For list headers, items that fail to parse are skipped rather than rejected.

## Usage

Ranges:

```python
from typedheaders.range import Range, ByteRangeSpec

r = Range.parse_header("bytes=1-100,200-")
print(str(r))                         # bytes=1-100,200-
print(repr(r.fmt_header()))           # 'Range: bytes=1-100,200-\r\n'

assert Range.parse_header("custom=a-f") == Range.unregistered("custom", "a-f")

spec = ByteRangeSpec.last(2)
print(spec.to_satisfiable_range(3))   # (1, 2)
print(ByteRangeSpec.from_to(3, 3).to_satisfiable_range(3))   # None
```

Strict-Transport-Security; an unparseable value raises `HeaderError`:

```python
from typedheaders.base import HeaderError
from typedheaders.hsts import StrictTransportSecurity

try:
    StrictTransportSecurity.parse_header("includeSubDomains")
except HeaderError:
    print("max-age is required")

hsts = StrictTransportSecurity.including_subdomains(31536000)
print(str(hsts))               # max-age=31536000; includeSubdomains
```

Preferences (`Prefer` and `Preference-Applied`):

```python
from typedheaders.prefer import Prefer, PreferenceApplied, Preference

prefer = Prefer.parse_header("wait=100, handling=lenient, respond-async")
assert list(prefer) == [
    Preference.wait(100),
    Preference.handling_lenient(),
    Preference.respond_async(),
]

ext = Preference.extension("foo", "bar", [("a", "b")])
print(ext)                                   # foo=bar; a=b
print(PreferenceApplied([ext]))              # foo=bar  (parameters dropped)
```

A `Prefer` or `Preference-Applied` value with no valid preference raises
`HeaderError`; a single bad preference string given to `Preference.from_str`
raises `PreferenceError`.

Protocol upgrades, `Vary` and `Pragma`:

```python
from typedheaders.upgrade import Upgrade, Protocol, ProtocolName
from typedheaders.vary import Vary
from typedheaders.pragma import Pragma

up = Upgrade.parse_header("HTTP/2.0, WebSocket")
assert list(up) == [
    Protocol(ProtocolName.HTTP, "2.0"),
    Protocol(ProtocolName.WEBSOCKET),
]

assert Vary.parse_header("*").is_any()
assert list(Vary.parse_header("etag,cookie")) == ["ETag", "Cookie"]  # case-insensitive

assert Pragma.parse_header("No-Cache").is_no_cache()
```

Text headers keep the value exactly as given:

```python
from typedheaders.text import UserAgent

ua = UserAgent.parse_header("CERN-LineMode/2.15 libwww/2.17b3")
print(ua.value)
```

## What it does not do

The package provides individual header types only. There is no collection
type that stores several headers for a message, no lookup by header name, and
no HTTP client or server.

## Running the tests

```
pip install -e ".[test]"
pytest
```