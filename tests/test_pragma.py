import pytest

from typedheaders.base import HeaderError
from typedheaders.pragma import Pragma


def test_parse_no_cache():
    assert Pragma.parse_header("no-cache") == Pragma.no_cache()


def test_parse_extension():
    assert Pragma.parse_header("FoObar") == Pragma.ext("FoObar")


def test_parse_empty_fails():
    with pytest.raises(HeaderError):
        Pragma.parse_header("")


def test_no_cache_case_insensitive():
    parsed = Pragma.parse_header("NO-Cache")
    assert parsed.is_no_cache()
    assert str(parsed) == "no-cache"


def test_extension_not_no_cache():
    parsed = Pragma.parse_header("foobar")
    assert parsed.is_no_cache() is False
    assert str(parsed) == "foobar"


def test_fmt_header():
    assert Pragma.no_cache().fmt_header() == "Pragma: no-cache\r\n"
    assert Pragma.ext("foobar").fmt_header() == "Pragma: foobar\r\n"


def test_multiple_lines_rejected():
    with pytest.raises(HeaderError):
        Pragma.parse_header([b"no-cache", b"x"])