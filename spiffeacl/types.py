"""Shared data structures for spiffeacl."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SegmentView:
    """Path segments of a parsed identity URI."""

    segments: tuple[str, ...]
    separator: str = "/"

    def get_segments(self) -> tuple[str, ...]:
        return self.segments


@dataclass(slots=True)
class Decision:
    """Result of an authorization check."""

    identity: str
    allowed: bool
    reason: str
    pattern: Optional[str] = None
