"""Compiled matchers and the segment-wise matching algorithm."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .exceptions import BadPattern
from .segments import DEFAULT_SEPARATOR, DOUBLE_WILDCARD, SINGLE_WILDCARD, SPIFFE_PREFIX, parse_candidate

logger = logging.getLogger("spiffeacl.matcher")


def match_segments(pattern: Sequence[str], candidate: Sequence[str]) -> bool:
    """Compare validated pattern segments against candidate segments.

    ``*`` consumes exactly one candidate segment. ``**`` may only be the last
    pattern segment and accepts whatever remains, including nothing.
    """

    trace = logger.isEnabledFor(logging.DEBUG)
    if trace:
        logger.debug(
            "comparing %s (%d) with acl %s (%d)",
            "!".join(candidate),
            len(candidate),
            "!".join(pattern),
            len(pattern),
        )

    shortest = min(len(pattern), len(candidate))
    for idx in range(shortest):
        expected = pattern[idx]
        if expected == SINGLE_WILDCARD or expected == candidate[idx]:
            continue
        if expected == DOUBLE_WILDCARD:
            if trace:
                logger.debug("segment %d: '**' matches remainder", idx)
            return True
        if trace:
            logger.debug("segment %d: %r != %r", idx, expected, candidate[idx])
        return False

    if len(pattern) == len(candidate):
        return True
    # '**' after the candidate ran out; compile guarantees it is the last segment
    return len(pattern) > shortest and pattern[shortest] == DOUBLE_WILDCARD


@dataclass(frozen=True, slots=True)
class Matcher:
    """Compiled, immutable form of a validated pattern.

    Build instances with :func:`spiffeacl.compile` rather than directly; the
    constructor performs no validation.
    """

    segments: tuple[str, ...]
    separator: str = DEFAULT_SEPARATOR

    def matches(self, candidate: str) -> bool:
        """Return True if ``candidate`` satisfies the pattern.

        Malformed candidates (wrong prefix, empty segments) never match.
        """

        try:
            view = parse_candidate(candidate, self.separator)
        except BadPattern:
            return False
        return match_segments(self.segments, view.segments)

    def get_segments(self) -> tuple[str, ...]:
        return self.segments

    @property
    def pattern(self) -> str:
        return SPIFFE_PREFIX + self.separator.join(self.segments)
