"""Parse `go test -json` event streams into failure records."""

from __future__ import annotations

from .builder import RecordBuilder
from .classify import Classification, LineKind, classify, match_located
from .events import Action, Event, decode_event
from .stream import parse
from .records import FailureRecord, Occurrence

__all__ = [
    "Action",
    "Classification",
    "Event",
    "FailureRecord",
    "LineKind",
    "Occurrence",
    "RecordBuilder",
    "classify",
    "decode_event",
    "match_located",
    "parse",
]
