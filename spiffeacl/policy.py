"""Policy loading and validation for spiffeacl."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .compiler import compile_with_separator
from .exceptions import BadPattern, BadPolicy
from .segments import DEFAULT_SEPARATOR, check_separator


class IdentityPolicy(BaseModel):
    allow: list[str] = Field(default_factory=list)
    deny: list[str] = Field(default_factory=list)


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    output: Literal["stderr", "file"] = "stderr"
    file_path: str = "spiffeacl.log"
    rotate_bytes: int = 10_485_760

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("rotate_bytes")
    @classmethod
    def validate_rotate_bytes(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("rotate_bytes must be positive")
        return value


class Policy(BaseModel):
    version: int = 1
    separator: str = DEFAULT_SEPARATOR
    identities: IdentityPolicy = Field(default_factory=IdentityPolicy)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, value: str) -> str:
        try:
            check_separator(value)
        except BadPattern as exc:
            raise ValueError(exc.message) from exc
        return value

    @model_validator(mode="after")
    def check_patterns(self) -> "Policy":
        for pattern in [*self.identities.allow, *self.identities.deny]:
            try:
                compile_with_separator(pattern, self.separator)
            except BadPattern as exc:
                raise ValueError(f"{pattern!r}: {exc.message}") from exc
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Policy":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise BadPolicy(message=str(exc)) from exc


def load_policy(path: str | Path) -> Policy:
    """Load a policy from a YAML file."""

    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:  # pragma: no cover - direct passthrough
        raise BadPolicy(message=f"Failed to read policy: {exc}") from exc
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise BadPolicy(message=f"Failed to parse policy YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise BadPolicy(message="Policy YAML must be a mapping")
    return Policy.from_dict(data)
