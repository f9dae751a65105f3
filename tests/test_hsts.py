import pytest

from typedheaders.base import HeaderError
from typedheaders.hsts import StrictTransportSecurity


def test_parse_max_age():
    h = StrictTransportSecurity.parse_header("max-age=31536000")
    assert h == StrictTransportSecurity(include_subdomains=False, max_age=31536000)


def test_parse_max_age_no_value():
    with pytest.raises(HeaderError):
        StrictTransportSecurity.parse_header("max-age")


def test_parse_quoted_max_age():
    h = StrictTransportSecurity.parse_header('max-age="31536000"')
    assert h == StrictTransportSecurity(include_subdomains=False, max_age=31536000)


def test_parse_spaces_max_age():
    h = StrictTransportSecurity.parse_header("max-age = 31536000")
    assert h == StrictTransportSecurity(include_subdomains=False, max_age=31536000)


def test_parse_include_subdomains():
    h = StrictTransportSecurity.parse_header("max-age=15768000 ; includeSubDomains")
    assert h == StrictTransportSecurity(include_subdomains=True, max_age=15768000)


def test_parse_no_max_age():
    with pytest.raises(HeaderError):
        StrictTransportSecurity.parse_header("includeSubDomains")


def test_parse_max_age_nan():
    with pytest.raises(HeaderError):
        StrictTransportSecurity.parse_header("max-age = derp")


def test_parse_duplicate_directives():
    with pytest.raises(HeaderError):
        StrictTransportSecurity.parse_header("max-age=100; max-age=5; max-age=0")


def test_parse_duplicate_subdomains():
    with pytest.raises(HeaderError):
        StrictTransportSecurity.from_str("max-age=1; includeSubdomains; includesubdomains")


def test_unknown_directives_ignored():
    h = StrictTransportSecurity.from_str("preload; max-age=10")
    assert h == StrictTransportSecurity.excluding_subdomains(10)


def test_constructors():
    assert StrictTransportSecurity.including_subdomains(5).include_subdomains is True
    assert StrictTransportSecurity.excluding_subdomains(5).include_subdomains is False


def test_format():
    assert str(StrictTransportSecurity.including_subdomains(31536000)) == (
        "max-age=31536000; includeSubdomains"
    )
    assert str(StrictTransportSecurity.excluding_subdomains(60)) == "max-age=60"


def test_fmt_header():
    h = StrictTransportSecurity.including_subdomains(31536000)
    assert h.fmt_header() == (
        "Strict-Transport-Security: max-age=31536000; includeSubdomains\r\n"
    )


def test_round_trip():
    h = StrictTransportSecurity.including_subdomains(15768000)
    assert StrictTransportSecurity.parse_header(str(h)) == h