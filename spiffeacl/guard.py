"""Policy-driven authorization of SPIFFE identities."""

from __future__ import annotations

from typing import Iterable

from .acl import IdentityACL
from .audit import AuditLogger
from .exceptions import PolicyDenied
from .policy import Policy
from .types import Decision


class Authorizer:
    """Evaluates identities against a policy and audits every decision."""

    def __init__(self, policy: Policy) -> None:
        self.policy = policy
        self.acl = IdentityACL(
            policy.identities.allow,
            policy.identities.deny,
            separator=policy.separator,
        )
        self.audit = AuditLogger(policy.logging, policy.version)

    def evaluate(self, identity: str) -> Decision:
        allowed, reason, matcher = self.acl.decide(identity)
        decision = Decision(
            identity=identity,
            allowed=allowed,
            reason=reason,
            pattern=matcher.pattern if matcher is not None else None,
        )
        self.audit.log(decision)
        return decision

    def check(self, identity: str) -> Decision:
        decision = self.evaluate(identity)
        if not decision.allowed:
            raise PolicyDenied(
                message="Identity not authorized",
                details={"identity": identity, "reason": decision.reason, "pattern": decision.pattern},
            )
        return decision

    def authorize(self, identities: Iterable[str]) -> list[Decision]:
        """Check each identity in turn, raising on the first denial."""

        return [self.check(identity) for identity in identities]

    def close(self) -> None:
        self.audit.close()
