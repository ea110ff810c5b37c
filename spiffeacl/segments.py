"""Splitting SPIFFE identity URIs into path segments."""

from __future__ import annotations

from .exceptions import EmptyPattern, InvalidPrefix, InvalidSegment, InvalidSeparator
from .types import SegmentView

SPIFFE_PREFIX = "spiffe://"
PREFIX_LEN = len(SPIFFE_PREFIX)
DEFAULT_SEPARATOR = "/"

SINGLE_WILDCARD = "*"
DOUBLE_WILDCARD = "**"


def has_prefix(uri: str) -> bool:
    return uri.startswith(SPIFFE_PREFIX)


def check_separator(separator: str) -> None:
    """Reject separators that cannot delimit segments."""

    if len(separator) != 1 or separator == SINGLE_WILDCARD:
        raise InvalidSeparator(
            message="separator must be a single character other than '*'",
            details={"separator": separator},
        )


def split_segments(uri: str, separator: str = DEFAULT_SEPARATOR) -> tuple[str, ...]:
    """Return the path segments following the spiffe:// prefix.

    One trailing separator is dropped before splitting. The caller must have
    checked the prefix already; an empty path yields a single empty segment.
    """

    path = uri[PREFIX_LEN:]
    if path.endswith(separator):
        path = path[: -len(separator)]
    return tuple(path.split(separator))


def parse_candidate(uri: str, separator: str = DEFAULT_SEPARATOR) -> SegmentView:
    """Parse an identity URI, rejecting a missing prefix or empty segments."""

    if uri == "":
        raise EmptyPattern(message="input was empty string")
    if not has_prefix(uri):
        raise InvalidPrefix(message="SPIFFE prefix invalid", details={"uri": uri})
    check_separator(separator)
    segments = split_segments(uri, separator)
    for segment in segments:
        if not segment:
            raise InvalidSegment(message="invalid SPIFFE segment (empty)", details={"uri": uri})
    return SegmentView(segments=segments, separator=separator)
