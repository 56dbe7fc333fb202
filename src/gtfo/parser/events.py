"""Decoding of single `go test -json` lines into `Event` values.

Decoding follows the rules of the Go encoder that produces the stream: keys
match case-insensitively, unknown keys (`Elapsed`, ...) are ignored, `null`
stands for the zero value, and the known fields must hold strings.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

import jsonschema

from ..core.errors import DecodeError

_KNOWN_FIELDS = ("time", "action", "package", "test", "output")

EVENT_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {name: {"type": ["string", "null"]} for name in _KNOWN_FIELDS},
}

_VALIDATOR = jsonschema.Draft7Validator(EVENT_SCHEMA)

# json.loads keeps unpaired \uD800-\uDFFF escapes; Go decodes each to U+FFFD.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


class Action(str, Enum):
    RUN = "run"
    OUTPUT = "output"
    PASS = "pass"
    FAIL = "fail"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str) -> "Action":
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Event:
    action: Action = Action.OTHER
    package: str = ""
    test: str = ""
    output: str = ""
    time: str = ""


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid JSON literal {name}")


def _text(value: str | None) -> str:
    return _LONE_SURROGATE.sub("\ufffd", value) if value else ""


def _fold_keys(payload: dict[str, Any]) -> dict[str, Any]:
    folded: dict[str, Any] = {}
    for key, value in payload.items():
        name = key.lower()
        if name in _KNOWN_FIELDS:
            folded[name] = value
    return folded


def decode_event(raw: str, line_no: int = 0) -> Event:
    text = raw.rstrip("\r\n")
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"line {line_no}: invalid JSON event: {exc}", line_no) from exc
    if payload is None:
        return Event()
    if not isinstance(payload, dict):
        raise DecodeError(
            f"line {line_no}: invalid JSON event: expected an object, got {type(payload).__name__}",
            line_no,
        )
    fields = _fold_keys(payload)
    try:
        _VALIDATOR.validate(fields)
    except jsonschema.ValidationError as exc:
        where = ".".join(str(p) for p in exc.absolute_path) or "<root>"
        raise DecodeError(f"line {line_no}: invalid JSON event: {where}: {exc.message}", line_no) from exc
    return Event(
        action=Action.parse(fields.get("action") or ""),
        package=_text(fields.get("package")),
        test=_text(fields.get("test")),
        output=_text(fields.get("output")),
        time=_text(fields.get("time")),
    )
