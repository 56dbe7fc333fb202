from __future__ import annotations

from .loader import CONFIG_SCHEMA, DEFAULT_CONFIG_NAME, load_config

__all__ = ["CONFIG_SCHEMA", "DEFAULT_CONFIG_NAME", "load_config"]
