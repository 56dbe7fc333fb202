"""Canonical runtime logging facade."""

from __future__ import annotations

from .clock import utc_now_iso
from .logging import log_event

__all__ = ["log_event", "utc_now_iso"]
