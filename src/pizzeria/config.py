"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        msg = f"{name} must be a logging level name, got '{raw}'"
        raise ValueError(msg)
    return level


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("PIZZERIA_ENV", cls.environment),
            log_level=_env_log_level("PIZZERIA_LOG_LEVEL", cls.log_level),
        )


__all__ = ["AppSettings"]
