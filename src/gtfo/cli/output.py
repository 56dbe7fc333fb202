"""CLI payload output helpers."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.serialize import dumps_json
from ..parser.records import FailureRecord


def build_payload(records: Sequence[FailureRecord], rendered: Sequence[str], module: str) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "gtfo",
        "status": "failures" if records else "ok",
        "module": module,
        "count": len(records),
        "failures": [{**record.to_json(), "rendered": text} for record, text in zip(records, rendered)],
    }


def emit(payload: dict[str, object]) -> None:
    print(dumps_json(payload))


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": "gtfo.error.v1",
                "schema_version": 1,
                "tool": "gtfo",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            pretty=False,
        )
    return f"gtfo: {message}"
