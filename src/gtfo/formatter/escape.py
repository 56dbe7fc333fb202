from __future__ import annotations

# Shells make it awkward to pass real control characters in a flag value, so
# the two-character sequences are expanded before the template is compiled.
_ESCAPES = (
    ("\\r\\n", "\r\n"),
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
)


def escape(template: str) -> str:
    for literal, control in _ESCAPES:
        template = template.replace(literal, control)
    return template
