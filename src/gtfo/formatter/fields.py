"""Template fields derived from a failure record.

Key              | Name               | Example
---              | ---                | ---
{{.FullPackage}} | Absolute package   | github.com/nobe4/gtfo/internal/parser
{{.Package}}     | Local package      | internal/parser
{{.Module}}      | Project's module   | github.com/nobe4/gtfo
{{.File}}        | Filename           | parser_test.go
{{.FullPath}}    | Absolute file path | github.com/nobe4/gtfo/internal/parser/parser_test.go
{{.Path}}        | Relative file path | internal/parser/parser_test.go
{{.Line}}        | Log line           | 42
{{.Output}}      | Test output        | error\\nsomething\\nis\\nwrong
{{.Name}}        | Test name          | TestParse
{{.Occurrences}} | All file:line logs | [{"Line": "42", "Output": "error"}]
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from ..parser.records import FailureRecord

FIELD_NAMES = frozenset(
    {"FullPackage", "Package", "Module", "File", "FullPath", "Path", "Line", "Output", "Name", "Occurrences"}
)


def join_path(*parts: str) -> str:
    kept = [p for p in parts if p]
    if not kept:
        return ""
    return posixpath.normpath("/".join(kept))


@dataclass(frozen=True)
class RenderFields:
    full_package: str
    package: str
    module: str
    file: str
    full_path: str
    path: str
    line: str
    output: str
    name: str
    occurrences: tuple[tuple[str, str], ...]

    @classmethod
    def from_record(cls, record: FailureRecord, module: str) -> "RenderFields":
        package = record.package.removeprefix(module + "/")
        return cls(
            full_package=record.package,
            package=package,
            module=module,
            file=record.file,
            full_path=join_path(record.package, record.file),
            path=join_path(package, record.file),
            line=record.line,
            output=record.output,
            name=record.name,
            occurrences=tuple((o.line, o.message) for o in record.occurrences),
        )

    def as_template_vars(self) -> dict[str, object]:
        return {
            "FullPackage": self.full_package,
            "Package": self.package,
            "Module": self.module,
            "File": self.file,
            "FullPath": self.full_path,
            "Path": self.path,
            "Line": self.line,
            "Output": self.output,
            "Name": self.name,
            "Occurrences": [{"Line": line, "Output": message} for line, message in self.occurrences],
        }


def render_fields(record: FailureRecord, module: str) -> RenderFields:
    return RenderFields.from_record(record, module)
