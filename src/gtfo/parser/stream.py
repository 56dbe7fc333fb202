from __future__ import annotations

from collections.abc import Iterable

from .builder import RecordBuilder
from .events import decode_event
from .records import FailureRecord


def parse(lines: Iterable[str]) -> list[FailureRecord]:
    """Return the failing tests found in a `go test -json` stream, in order.

    Raises `DecodeError` on the first line that is not a valid event; nothing
    parsed before it is returned.
    """
    builder = RecordBuilder()
    for line_no, raw in enumerate(lines, start=1):
        builder.feed(decode_event(raw, line_no))
    return builder.records
