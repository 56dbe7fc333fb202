from __future__ import annotations

from .escape import escape
from .fields import FIELD_NAMES, RenderFields, join_path, render_fields
from .render import Formatter, compile_template, prepare, to_jinja

__all__ = [
    "FIELD_NAMES",
    "Formatter",
    "RenderFields",
    "compile_template",
    "escape",
    "join_path",
    "prepare",
    "render_fields",
    "to_jinja",
]
