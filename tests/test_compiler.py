import logging

import pytest

from spiffeacl import compile, compile_list, compile_with_separator, must_compile
from spiffeacl.exceptions import (
    BadPattern,
    EmptyPattern,
    FatalPatternError,
    InvalidDoubleWildcard,
    InvalidPrefix,
    InvalidSegment,
    InvalidSeparator,
    InvalidSingleWildcard,
)


def test_compile_segments() -> None:
    matcher = compile("spiffe://example.org/ns/*/sa/**")
    assert matcher.get_segments() == ("example.org", "ns", "*", "sa", "**")
    assert matcher.separator == "/"
    assert matcher.pattern == "spiffe://example.org/ns/*/sa/**"


@pytest.mark.parametrize(
    ("pattern", "error"),
    [
        ("", EmptyPattern),
        ("other://a", InvalidPrefix),
        ("spiffe:/a", InvalidPrefix),
        ("spiffe://a/**/b", InvalidDoubleWildcard),
        ("spiffe://**/", InvalidDoubleWildcard),
        ("spiffe://a/***", InvalidDoubleWildcard),
        ("spiffe://a/b**", InvalidDoubleWildcard),
        ("spiffe://a/*b", InvalidSingleWildcard),
        ("spiffe://a/b*/c", InvalidSingleWildcard),
        ("spiffe://a//b", InvalidSegment),
        ("spiffe://", InvalidSegment),
    ],
)
def test_compile_rejects(pattern: str, error: type) -> None:
    with pytest.raises(error):
        compile(pattern)


def test_compile_errors_are_bad_patterns() -> None:
    with pytest.raises(BadPattern) as info:
        compile("spiffe://a/*b")
    assert info.value.details == {"segment": "*b", "pattern": "spiffe://a/*b"}


def test_compile_is_idempotent() -> None:
    first = compile("spiffe://a/*/c")
    second = compile("spiffe://a/*/c")
    assert first == second
    for candidate in ["spiffe://a/b/c", "spiffe://a/x/c/", "spiffe://a/b", "spiffe://a/b/c/d"]:
        assert first.matches(candidate) == second.matches(candidate)


def test_trailing_separator_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="spiffeacl.compiler"):
        matcher = compile("spiffe://a/b/")
    assert matcher.get_segments() == ("a", "b")
    assert "ends with a separator" in caplog.text


def test_compile_with_separator() -> None:
    matcher = compile_with_separator("spiffe://example.org:ns:*", ":")
    assert matcher.get_segments() == ("example.org", "ns", "*")
    assert matcher.matches("spiffe://example.org:ns:default")
    assert not matcher.matches("spiffe://example.org/ns/default")


def test_compile_with_bad_separator() -> None:
    with pytest.raises(InvalidSeparator):
        compile_with_separator("spiffe://a", "*")


def test_compile_list() -> None:
    matchers = compile_list(["spiffe://a", "spiffe://b/**"])
    assert [m.get_segments() for m in matchers] == [("a",), ("b", "**")]


def test_compile_list_stops_at_first_error() -> None:
    with pytest.raises(InvalidPrefix):
        compile_list(["spiffe://a", "bad", "spiffe://a//b"])


def test_must_compile() -> None:
    assert must_compile("spiffe://a/*").matches("spiffe://a/b")


def test_must_compile_is_fatal() -> None:
    with pytest.raises(FatalPatternError) as info:
        must_compile("spiffe://a/**/b")
    assert isinstance(info.value.cause, InvalidDoubleWildcard)
    assert not isinstance(info.value, BadPattern)
