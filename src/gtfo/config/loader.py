from __future__ import annotations

from pathlib import Path
from typing import Any

import jsonschema
import yaml

from ..core.errors import ConfigError

DEFAULT_CONFIG_NAME = ".gtfo.yaml"

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "format": {"type": "string"},
        "module": {"type": "string"},
        "log_json": {"type": "boolean"},
    },
}


def load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_config(cwd: Path, explicit: str | None = None) -> dict[str, Any]:
    """Load and validate the optional YAML config file.

    Without `explicit`, a missing `.gtfo.yaml` in `cwd` yields an empty mapping.
    An explicit path must exist.
    """
    path = Path(explicit) if explicit else cwd / DEFAULT_CONFIG_NAME
    if not path.is_absolute():
        path = cwd / path
    if not path.exists():
        if explicit:
            raise ConfigError(f"config file not found: {path}")
        return {}
    try:
        data = load_yaml(path)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"unable to read config file {path}: {exc}") from exc
    if data is None:
        return {}
    try:
        jsonschema.validate(data, CONFIG_SCHEMA)
    except jsonschema.ValidationError as exc:
        where = ".".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ConfigError(f"invalid config file {path}: {where}: {exc.message}") from exc
    return dict(data)
