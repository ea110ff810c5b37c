"""Identity Access Control Lists."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .compiler import compile_with_separator
from .exceptions import BadPattern
from .matcher import Matcher
from .segments import DEFAULT_SEPARATOR, parse_candidate


def first_match(identity: str, matchers: Sequence[Matcher]) -> Optional[Matcher]:
    for matcher in matchers:
        if matcher.matches(identity):
            return matcher
    return None


class IdentityACL:
    """Allow/deny lists of compiled SPIFFE ID patterns."""

    def __init__(
        self,
        allow: Iterable[str],
        deny: Iterable[str] = (),
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self.separator = separator
        self.allow_matchers = [compile_with_separator(pattern, separator) for pattern in allow]
        self.deny_matchers = [compile_with_separator(pattern, separator) for pattern in deny]

    def decide(self, identity: str) -> tuple[bool, str, Optional[Matcher]]:
        """Return ``(allowed, reason, matcher)`` for ``identity``.

        Malformed identities are always denied, even with an empty allow list.
        Deny patterns take precedence over allow patterns.
        """

        try:
            parse_candidate(identity, self.separator)
        except BadPattern:
            return False, "MalformedIdentity", None
        denied_by = first_match(identity, self.deny_matchers)
        if denied_by is not None:
            return False, "Denied", denied_by
        if not self.allow_matchers:
            return True, "NoAllowList", None
        allowed_by = first_match(identity, self.allow_matchers)
        if allowed_by is None:
            return False, "NotAllowed", None
        return True, "Allowed", allowed_by

    def is_allowed(self, identity: str) -> bool:
        allowed, _, _ = self.decide(identity)
        return allowed
