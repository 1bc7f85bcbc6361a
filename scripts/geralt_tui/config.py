"""
Runtime configuration.

Values come from GERALT_* environment variables and can be overridden by
command-line flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping

from geralt_tui.errors import ConfigError

DEFAULT_EXECUTABLE = "geralt"


@dataclass(frozen=True)
class GeraltConfig:
    """Settings for reaching geralt and for the key table."""

    executable: str = DEFAULT_EXECUTABLE
    timeout: float | None = None
    cwd: Path | None = None
    key_overrides: dict[str, str] = field(default_factory=dict)

    def with_overrides(self, **changes) -> GeraltConfig:
        """Return a copy with the non-None ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid timeout: {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"Timeout must be positive, got {raw!r}")
    return value


def parse_key_overrides(raw: str | None) -> dict[str, str]:
    """Parse ``action=key,action=key`` into a dict."""
    if not raw or not raw.strip():
        return {}
    overrides = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        action, sep, key = item.partition("=")
        if not sep or not action.strip() or not key.strip():
            raise ConfigError(f"Invalid key override: {item!r} (expected action=key)")
        overrides[action.strip()] = key.strip()
    return overrides


def load_config(environ: Mapping[str, str] | None = None) -> GeraltConfig:
    """Build a config from the environment."""
    if environ is None:
        environ = os.environ
    cwd = environ.get("GERALT_CWD")
    return GeraltConfig(
        executable=environ.get("GERALT_EXECUTABLE") or DEFAULT_EXECUTABLE,
        timeout=parse_timeout(environ.get("GERALT_TIMEOUT")),
        cwd=Path(cwd) if cwd else None,
        key_overrides=parse_key_overrides(environ.get("GERALT_KEYS")),
    )
