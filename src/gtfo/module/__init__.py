from __future__ import annotations

from .resolve import MANIFEST_NAME, resolve_module

__all__ = ["MANIFEST_NAME", "resolve_module"]
