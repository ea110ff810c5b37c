"""Custom exceptions for spiffeacl."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SpiffeACLException(Exception):
    """Base class for spiffeacl exceptions."""

    message: str
    details: dict[str, object] | None = None

    def __str__(self) -> str:  # pragma: no cover - dataclass str wrapper
        return self.message


class BadPattern(SpiffeACLException):
    """Raised when a pattern or identity URI fails validation."""


class EmptyPattern(BadPattern):
    """Input pattern was the empty string."""


class InvalidPrefix(BadPattern):
    """Input does not start with the spiffe:// prefix."""


class InvalidSingleWildcard(BadPattern):
    """A '*' is embedded in a segment instead of being the whole segment."""


class InvalidDoubleWildcard(BadPattern):
    """A '**' is embedded in a segment or is not the final segment."""


class InvalidSegment(BadPattern):
    """A segment is empty, e.g. a doubled separator."""


class InvalidSeparator(BadPattern):
    """The separator is not a single non-wildcard character."""


class BadPolicy(SpiffeACLException):
    """Raised when a policy file cannot be parsed or validated."""


class PolicyDenied(SpiffeACLException):
    """Raised when an identity is not authorized by the policy."""


class FatalPatternError(RuntimeError):
    """Raised by must_compile when a trusted constant pattern is invalid.

    Not a BadPattern on purpose: callers handling recoverable compile errors
    must not catch it.
    """

    def __init__(self, pattern: str, cause: BadPattern) -> None:
        super().__init__(f"invalid constant pattern {pattern!r}: {cause.message}")
        self.pattern = pattern
        self.cause = cause
