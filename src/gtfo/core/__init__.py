"""gtfo core package."""
from .context import DEFAULT_TEMPLATE, RunContext
from .errors import ConfigError, DecodeError, ManifestMissing, ScriptError, TemplateError
from .serialize import dumps_json

__all__ = [
    "DEFAULT_TEMPLATE",
    "RunContext",
    "ScriptError",
    "DecodeError",
    "TemplateError",
    "ConfigError",
    "ManifestMissing",
    "dumps_json",
]
