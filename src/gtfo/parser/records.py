from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Occurrence:
    line: str
    message: str

    def to_json(self) -> dict[str, str]:
        return {"line": self.line, "message": self.message}


@dataclass
class FailureRecord:
    """One failing test reconstructed from the event stream.

    Records are mutable: the parser keeps feeding the live object after it has
    been appended to the results, until the next `run` event starts a new one.
    """

    package: str = ""
    name: str = ""
    file: str = ""
    occurrences: list[Occurrence] = field(default_factory=list)
    overflow: str = ""
    failed: bool = False

    @property
    def line(self) -> str:
        return self.occurrences[0].line if self.occurrences else ""

    @property
    def output(self) -> str:
        return "\n".join(o.message for o in self.occurrences) + self.overflow

    def to_json(self) -> dict[str, object]:
        return {
            "name": self.name,
            "package": self.package,
            "file": self.file,
            "occurrences": [o.to_json() for o in self.occurrences],
            "overflow": self.overflow,
        }
