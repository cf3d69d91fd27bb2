"""
Process configuration read from the environment.

Loaded once at startup. A missing signing key is fatal: ``Settings.from_env``
raises ConfigurationError and the process refuses to start.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from anchorly.adapters.auth.tokens import DEFAULT_ISSUER, DEFAULT_LIFETIME
from anchorly.domain.errors import ConfigurationError

TOKEN_KEY_VAR = "ANCHORLY_TOKEN_KEY"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _int_or_none(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    token_key: bytes = field(repr=False)
    token_issuer: str = DEFAULT_ISSUER
    token_lifetime: timedelta = DEFAULT_LIFETIME
    hash_time_cost: int | None = None
    hash_memory_cost: int | None = None
    data_dir: Path | None = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.token_key:
            raise ConfigurationError(f"Expected {TOKEN_KEY_VAR} to be configured.")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        key = env.get(TOKEN_KEY_VAR)
        if not key:
            raise ConfigurationError(
                f"Expected environment variable {TOKEN_KEY_VAR} to be configured."
            )

        ttl_minutes = _int_or_none(env, "ANCHORLY_TOKEN_TTL_MINUTES")
        data_dir = env.get("ANCHORLY_DATA_DIR")

        log_level = (env.get("ANCHORLY_LOG_LEVEL") or "INFO").upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"ANCHORLY_LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            token_key=key.encode("utf-8"),
            token_issuer=env.get("ANCHORLY_TOKEN_ISSUER") or DEFAULT_ISSUER,
            token_lifetime=timedelta(minutes=ttl_minutes) if ttl_minutes else DEFAULT_LIFETIME,
            hash_time_cost=_int_or_none(env, "ANCHORLY_HASH_TIME_COST"),
            hash_memory_cost=_int_or_none(env, "ANCHORLY_HASH_MEMORY_COST"),
            data_dir=Path(data_dir) if data_dir else None,
            log_level=log_level,
        )

    @property
    def db_path(self) -> str | None:
        """SQLite database path, or None when running on in-memory repos."""
        if self.data_dir is None:
            return None
        return str(self.data_dir / "anchorly.db")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
