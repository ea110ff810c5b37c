"""Structured audit logging."""

from __future__ import annotations

import itertools
import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from .policy import LoggingSettings
from .types import Decision

_instance_ids = itertools.count(1)


class AuditLogger:
    """Writes authorization decisions as JSON lines.

    Each instance owns a child of the ``spiffeacl.audit`` logger, so handlers
    and levels of different policies never leak into each other.
    """

    def __init__(self, settings: LoggingSettings, policy_version: int) -> None:
        self.logger = logging.getLogger(f"spiffeacl.audit.{next(_instance_ids)}")
        self.handler: logging.Handler
        if settings.output == "file":
            self.handler = RotatingFileHandler(
                settings.file_path,
                maxBytes=settings.rotate_bytes,
                backupCount=3,
            )
        else:
            self.handler = logging.StreamHandler()
        self.handler.setFormatter(logging.Formatter("%(message)s"))
        self.logger.addHandler(self.handler)
        self.logger.setLevel(getattr(logging, settings.level))
        self.policy_version = policy_version

    def log(self, decision: Decision) -> None:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "identity": decision.identity,
            "decision": "allow" if decision.allowed else "deny",
            "reason": decision.reason,
            "pattern": decision.pattern,
            "policy_version": self.policy_version,
        }
        self.logger.info(json.dumps(payload))

    def close(self) -> None:
        self.logger.removeHandler(self.handler)
        self.handler.close()
