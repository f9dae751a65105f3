import pytest

from typedheaders.base import HeaderError
from typedheaders.prefer import Prefer, Preference, PreferenceApplied, PreferenceError


def test_parse_multiple_headers():
    prefer = Prefer.parse_header("respond-async, return=representation")
    assert prefer == Prefer(
        [Preference.respond_async(), Preference.return_representation()]
    )


def test_parse_argument():
    prefer = Prefer.parse_header("wait=100, handling=lenient, respond-async")
    assert prefer == Prefer(
        [Preference.wait(100), Preference.handling_lenient(), Preference.respond_async()]
    )


def test_parse_quote_form():
    prefer = Prefer.parse_header('wait="200", handling="strict"')
    assert prefer == Prefer([Preference.wait(200), Preference.handling_strict()])


def test_parse_extension():
    raw = 'foo, bar=baz, baz; foo; bar=baz, bux=""; foo="", buz="some parameter"'
    prefer = Prefer.parse_header(raw)
    assert prefer == Prefer(
        [
            Preference.extension("foo", "", []),
            Preference.extension("bar", "baz", []),
            Preference.extension("baz", "", [("foo", ""), ("bar", "baz")]),
            Preference.extension("bux", "", [("foo", "")]),
            Preference.extension("buz", "some parameter", []),
        ]
    )


def test_fail_with_args():
    with pytest.raises(HeaderError):
        Prefer.parse_header("respond-async; foo=bar")


def test_empty_fails():
    with pytest.raises(HeaderError):
        Prefer.parse_header("")


def test_multiple_lines():
    prefer = Prefer.parse_header(["respond-async, return=representation", "wait=100"])
    assert list(prefer) == [
        Preference.respond_async(),
        Preference.return_representation(),
        Preference.wait(100),
    ]


def test_wait_errors():
    with pytest.raises(PreferenceError):
        Preference.from_str("wait=abc")
    with pytest.raises(PreferenceError):
        Preference.from_str("wait=4294967296")
    with pytest.raises(PreferenceError):
        Preference.from_str("wait=5; x=y")


def test_wait_seconds():
    assert Preference.from_str("wait=30").seconds == 30
    assert Preference.respond_async().seconds is None


def test_extension_differs_from_registered():
    assert Preference.extension("respond-async", "", []) != Preference.respond_async()


def test_format_preferences():
    assert str(Preference.return_minimal()) == "return=minimal"
    assert str(Preference.wait(10)) == "wait=10"
    ext = Preference.extension("baz", "", [("foo", ""), ("bar", "baz")])
    assert str(ext) == "baz; foo; bar=baz"


def test_fmt_header():
    prefer = Prefer([Preference.respond_async(), Preference.wait(10)])
    assert prefer.fmt_header() == "Prefer: respond-async, wait=10\r\n"


def test_round_trip():
    text = "respond-async, wait=100, foo=bar; a=b"
    assert str(Prefer.parse_header(text)) == text


def test_format_ignore_parameters():
    applied = PreferenceApplied(
        [Preference.extension("foo", "bar", [("bar", "foo"), ("buz", "")])]
    )
    assert str(applied) == "foo=bar"


def test_preference_applied_parse_and_name():
    applied = PreferenceApplied.parse_header("return=minimal, wait=5")
    assert applied == PreferenceApplied(
        [Preference.return_minimal(), Preference.wait(5)]
    )
    assert applied.fmt_header() == "Preference-Applied: return=minimal, wait=5\r\n"


def test_preference_applied_empty_fails():
    with pytest.raises(HeaderError):
        PreferenceApplied.parse_header(" , ")