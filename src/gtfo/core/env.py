"""Centralized environment variable helpers."""

from __future__ import annotations

import os

_TRUTHY = {"1", "true", "yes", "on"}


def getenv(name: str, default: str | None = None) -> str | None:
    return os.environ.get(name, default)


def getenv_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUTHY
