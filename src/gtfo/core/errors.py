from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_CONFIG, ERR_DECODE, ERR_TEMPLATE, OK


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class DecodeError(ScriptError):
    """An input line is not a valid `go test -json` event."""

    def __init__(self, message: str, line_no: int = 0) -> None:
        super().__init__(message, ERR_DECODE, "decode_error")
        self.line_no = line_no


class TemplateError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_TEMPLATE, "template_error")


class ConfigError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_CONFIG, "config_error")


class ManifestMissing(ScriptError):
    """Recoverable: callers fall back to an empty module name.

    Never turned into an exit status, so the code is `OK`.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, OK, "manifest_missing")
