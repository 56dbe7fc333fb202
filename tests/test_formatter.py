from __future__ import annotations

import pytest

from gtfo.core.errors import TemplateError
from gtfo.formatter import RenderFields, escape, join_path, prepare, render_fields, to_jinja
from gtfo.parser.records import FailureRecord, Occurrence


def _record(package: str = "", file: str = "", line: str = "", output: str = "") -> FailureRecord:
    occurrences = [Occurrence(line, output)] if line or output else []
    return FailureRecord(package=package, file=file, occurrences=occurrences)


@pytest.mark.parametrize(
    ("template", "module", "record", "expected"),
    [
        ("", "", FailureRecord(), ""),
        ("test", "", FailureRecord(), "test"),
        ("{{.FullPackage}}", "", _record(package="package"), "package"),
        ("{{.Package}}", "module", _record(package="module/package"), "package"),
        ("{{.FullPath}}", "", _record(package="module/package", file="file"), "module/package/file"),
        ("{{.Path}}", "module", _record(package="module/package", file="file"), "package/file"),
        (
            "{{.FullPackage}} {{.Package}} {{.Module}} {{.File}} {{.FullPath}} {{.Path}} {{.Line}} {{.Output}}",
            "module",
            _record(package="module/package", file="file", line="1", output="output"),
            "module/package package module file module/package/file package/file 1 output",
        ),
        (r"{{.Module}}\n{{.Module}}\t{{.Module}}", "module", FailureRecord(), "module\nmodule\tmodule"),
        ("{{ .Line }}|{{- .Output -}} |", "", _record(line="3", output="x"), "3|x|"),
    ],
)
def test_format(template: str, module: str, record: FailureRecord, expected: str) -> None:
    assert prepare(template, module)(record) == expected


def test_default_template_shape() -> None:
    record = FailureRecord(
        package="github.com/nobe4/gtfo/internal/parser",
        file="parser_test.go",
        occurrences=[Occurrence("42", "error")],
        overflow="\n        something",
    )
    out = prepare(r"{{.Path}}:{{.Line}}: {{.Output}}\n", "github.com/nobe4/gtfo")(record)
    assert out == "internal/parser/parser_test.go:42: error\n        something\n"


def test_output_template_is_the_derived_output() -> None:
    record = FailureRecord(occurrences=[Occurrence("1", "a"), Occurrence("2", "b")], overflow="\n  c\n  d")
    assert prepare("{{.Output}}", "")(record) == record.output == "a\nb\n  c\n  d"


def test_name_and_occurrences_fields() -> None:
    record = FailureRecord(name="TestX", occurrences=[Occurrence("5", "a"), Occurrence("6", "b")])
    template = "{{.Name}}:{% for o in Occurrences %} {{ o.Line }}={{ o.Output }}{% endfor %}"
    assert prepare(template, "")(record) == "TestX: 5=a 6=b"


def test_module_prefix_is_only_trimmed_with_separator() -> None:
    fields = render_fields(_record(package="modulex/pkg", file="f_test.go"), "module")
    assert fields.package == "modulex/pkg"
    assert fields.path == "modulex/pkg/f_test.go"


def test_render_fields_for_empty_record() -> None:
    assert render_fields(FailureRecord(), "") == RenderFields(
        full_package="",
        package="",
        module="",
        file="",
        full_path="",
        path="",
        line="",
        output="",
        name="",
        occurrences=(),
    )


@pytest.mark.parametrize(
    ("parts", "expected"),
    [(("", ""), ""), (("pkg", ""), "pkg"), (("", "f.go"), "f.go"), (("a/b/", "f.go"), "a/b/f.go")],
)
def test_join_path(parts: tuple[str, str], expected: str) -> None:
    assert join_path(*parts) == expected


def test_invalid_template_fails_before_rendering() -> None:
    with pytest.raises(TemplateError) as excinfo:
        prepare("{{.Missing End }", "")
    assert excinfo.value.kind == "template_error"


def test_unknown_field_fails_before_rendering() -> None:
    with pytest.raises(TemplateError, match="Nope"):
        prepare("{{.Nope}}", "")


@pytest.mark.parametrize(
    ("template", "expected"),
    [("", ""), ("abcd", "abcd"), (r"a\nb", "a\nb"), (r"a\nb\tc", "a\nb\tc"), (r"a\r\nb", "a\r\nb")],
)
def test_escape(template: str, expected: str) -> None:
    assert escape(template) == expected


def test_carriage_returns_survive_compilation() -> None:
    assert prepare(r"a\rb\r\n", "")(FailureRecord()) == "a\rb\r\n"


def test_field_references_are_rewritten() -> None:
    assert to_jinja("{{.Path}}:{{ .Line }}{{- .Output -}}") == "{{ Path }}:{{ Line }}{{- Output -}}"


@pytest.mark.parametrize("template", ['{{printf "%q" .Output}}', "{{if .Line}}x{{end}}", "{{ .Output | printf }}"])
def test_go_pipelines_and_actions_are_rejected(template: str) -> None:
    with pytest.raises(TemplateError):
        prepare(template, "")


def test_jinja_statements_replace_go_actions() -> None:
    record = FailureRecord(occurrences=[Occurrence("7", "boom")])
    assert prepare("{% if Line %}L{{ Line }}{% endif %} {{ Output | tojson }}", "")(record) == 'L7 "boom"'
    assert prepare("{% if Line %}L{% endif %}", "")(FailureRecord()) == ""


def test_literal_comment_marker_must_be_quoted() -> None:
    assert prepare('{{ "{#" }} {{.Line}}', "")(FailureRecord(occurrences=[Occurrence("3", "")])) == "{# 3"
    with pytest.raises(TemplateError):
        prepare("{# {{.Line}}", "")
