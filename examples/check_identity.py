"""Authorize SPIFFE IDs given on the command line against examples/policy.yaml."""

import sys

from spiffeacl import Authorizer, load_policy, must_compile

ADMIN = must_compile("spiffe://example.org/ns/admin/**")

policy = load_policy("examples/policy.yaml")
authorizer = Authorizer(policy)


def main(identities: list[str]) -> int:
    status = 0
    for identity in identities:
        decision = authorizer.evaluate(identity)
        admin = " (admin)" if ADMIN.matches(identity) else ""
        print(f"{identity}: {'allow' if decision.allowed else 'deny'}{admin}")
        if not decision.allowed:
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
