from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "SOFTVERIFY_"


class VerifyConfig(BaseModel):
    """Process-wide verification defaults.

    Loaded once at session start and passed to :class:`~softverify.engine.Verifier`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
    default_wait_seconds: int = Field(default=5, ge=0)
    default_interval_millis: int = Field(default=10, ge=0)
    print_passed: bool = False


class VerifyOptions(BaseModel):
    """Per-call overrides for a verification.

    Unset fields fall back to the leaf's default message and the
    configured wait/interval.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
    wait_seconds: int | None = Field(default=None, ge=0)
    interval_millis: int | None = Field(default=None, ge=0)
    message: str | None = None
    params: tuple[Any, ...] = ()

    @field_validator("params", mode="before")
    @classmethod
    def normalize_params(cls, v: Any) -> tuple:
        if v is None:
            return ()
        if isinstance(v, (list, tuple)):
            return tuple(v)
        return (v,)


def default_config() -> VerifyConfig:
    return VerifyConfig()


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        return expandvars(value, nounset=True)
    return value


def load_config(path: Path) -> VerifyConfig:
    """Load and validate a config from a YAML file.

    String values may reference environment variables as ``${VAR}`` or
    ``${VAR:-default}``. Raises ValueError listing every variable that is
    unset and has no default.
    """
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    expanded: dict[str, Any] = {}
    missing: list[str] = []
    for key, value in raw.items():
        try:
            expanded[key] = _expand(value)
        except Exception:
            missing.append(f"  {key}={value}")

    if missing:
        details = "\n".join(missing)
        raise ValueError(f"{path}: missing environment variables:\n{details}")

    return VerifyConfig(**expanded)


def config_from_env(
    base: VerifyConfig | None = None, environ: dict[str, str] | None = None
) -> VerifyConfig:
    """Apply ``SOFTVERIFY_*`` environment overrides on top of *base*."""
    env = os.environ if environ is None else environ
    base = base or default_config()

    overrides: dict[str, Any] = {}
    for name in VerifyConfig.model_fields:
        value = env.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value

    if not overrides:
        return base
    return VerifyConfig(**{**base.model_dump(), **overrides})
