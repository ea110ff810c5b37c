"""Pattern validation and compilation."""

from __future__ import annotations

import logging
from typing import Iterable

from .exceptions import (
    BadPattern,
    EmptyPattern,
    FatalPatternError,
    InvalidDoubleWildcard,
    InvalidPrefix,
    InvalidSegment,
    InvalidSingleWildcard,
)
from .matcher import Matcher
from .segments import DEFAULT_SEPARATOR, DOUBLE_WILDCARD, SINGLE_WILDCARD, check_separator, has_prefix, split_segments

logger = logging.getLogger("spiffeacl.compiler")


def inner_double_wildcard(pattern: str) -> bool:
    """True if '**' occurs anywhere other than the very end of ``pattern``."""

    first = pattern.find(DOUBLE_WILDCARD)
    return -1 < first < len(pattern) - len(DOUBLE_WILDCARD)


def check_segment(segment: str) -> None:
    if len(segment) > 2 and DOUBLE_WILDCARD in segment:
        raise InvalidDoubleWildcard(
            message="wildcard '**' can only appear at end of pattern",
            details={"segment": segment},
        )
    if len(segment) > 1 and segment != DOUBLE_WILDCARD and SINGLE_WILDCARD in segment:
        raise InvalidSingleWildcard(
            message="wildcard '*' can only appear between two separators",
            details={"segment": segment},
        )
    if not segment:
        raise InvalidSegment(message="invalid SPIFFE segment (empty)")


def compile_with_separator(pattern: str, separator: str) -> Matcher:
    """Validate ``pattern`` and compile it into a :class:`Matcher`.

    Raises a :class:`BadPattern` subclass describing the first problem found.
    """

    if pattern == "":
        raise EmptyPattern(message="input pattern was empty string")
    if not has_prefix(pattern):
        raise InvalidPrefix(message="SPIFFE prefix invalid", details={"pattern": pattern})
    check_separator(separator)
    if inner_double_wildcard(pattern):
        raise InvalidDoubleWildcard(
            message="wildcard '**' can only appear at end of pattern",
            details={"pattern": pattern},
        )
    if pattern.endswith(separator):
        logger.warning("pattern %r ends with a separator; it is ignored", pattern)

    segments = split_segments(pattern, separator)
    for segment in segments:
        try:
            check_segment(segment)
        except BadPattern as exc:
            exc.details = {**(exc.details or {}), "pattern": pattern}
            raise
    return Matcher(segments=segments, separator=separator)


def compile(pattern: str) -> Matcher:
    """Compile ``pattern`` using '/' as the separator."""

    return compile_with_separator(pattern, DEFAULT_SEPARATOR)


def compile_list(patterns: Iterable[str]) -> list[Matcher]:
    """Compile every pattern; the first invalid one aborts the whole list."""

    return [compile(pattern) for pattern in patterns]


def must_compile(pattern: str) -> Matcher:
    """Compile a trusted constant pattern.

    Any validation error becomes a :class:`FatalPatternError`. Never call
    this with patterns that come from configuration or user input.
    """

    try:
        return compile(pattern)
    except BadPattern as exc:
        raise FatalPatternError(pattern, exc) from exc
