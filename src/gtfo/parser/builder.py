from __future__ import annotations

from .classify import LineKind, classify
from .events import Action, Event
from .records import FailureRecord, Occurrence


class RecordBuilder:
    """State machine turning events into failure records.

    Holds the record of the test currently running and whether it was already
    emitted. `run` replaces the current record without flushing it, `fail`
    emits it once, and output events keep mutating it in place.
    """

    def __init__(self) -> None:
        self.records: list[FailureRecord] = []
        self.current = FailureRecord()
        self.emitted = False

    def feed(self, event: Event) -> None:
        if event.action is Action.RUN:
            self._start(event)
        elif event.action is Action.FAIL:
            self._fail()
        elif event.action is Action.OUTPUT:
            self._output(event)

    def _start(self, event: Event) -> None:
        self.current = FailureRecord(package=event.package)
        self.emitted = False

    def _fail(self) -> None:
        self.current.failed = True
        if not self.emitted:
            self.emitted = True
            self.records.append(self.current)

    def _output(self, event: Event) -> None:
        c = classify(event.output)
        if c.kind is LineKind.START_MARKER:
            self.current.name = event.test
        elif c.kind is LineKind.LOCATED_MESSAGE:
            self.current.file = c.file
            self.current.occurrences.append(Occurrence(line=c.line, message=c.message))
        elif c.kind is LineKind.FREE_TEXT:
            self.current.overflow += "\n" + event.output.rstrip("\n")
