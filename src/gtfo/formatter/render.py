"""Output templates.

Templates use the Go `text/template` field syntax,
`{{.Path}}:{{.Line}}: {{.Output}}\\n`. Field references are rewritten to
Jinja2 expressions, so Jinja2 statements (`{% for o in Occurrences %}`) work
as well.
"""

from __future__ import annotations

import re
from collections.abc import Callable

import jinja2
from jinja2 import meta

from ..core.errors import TemplateError
from ..parser.records import FailureRecord
from .escape import escape
from .fields import FIELD_NAMES, render_fields

_FIELD_REF = re.compile(r"\{\{(-?)\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*(-?)\}\}")

_ENV = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)

Formatter = Callable[[FailureRecord], str]


def _rewrite_ref(m: re.Match[str]) -> str:
    return "{{" + m.group(1) + " " + m.group(2) + " " + m.group(3) + "}}"


def to_jinja(template: str) -> str:
    # Jinja2 folds "\r" and "\r\n" in template data into "\n".
    source = _FIELD_REF.sub(_rewrite_ref, template)
    return source.replace("\r", '{{ "\\r" }}')


def compile_template(template: str) -> jinja2.Template:
    source = to_jinja(escape(template))
    try:
        ast = _ENV.parse(source)
        unknown = meta.find_undeclared_variables(ast) - FIELD_NAMES - set(_ENV.globals)
        if unknown:
            raise TemplateError(f"unknown template field(s): {', '.join(sorted(unknown))}")
        return _ENV.from_string(source)
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateError(f"invalid template: {exc.message} (line {exc.lineno})") from exc


def prepare(template: str, module: str) -> Formatter:
    """Compile `template` once and return a function rendering one record."""
    compiled = compile_template(template)

    def format_record(record: FailureRecord) -> str:
        fields = render_fields(record, module)
        try:
            return compiled.render(fields.as_template_vars())
        except jinja2.TemplateError as exc:
            raise TemplateError(f"unable to render template for {record.name or record.package}: {exc}") from exc

    return format_record
