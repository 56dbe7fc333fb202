"""Classification of `output` event text.

`go test` frames each test with fixed four-character prefixes; whatever is not
framing is either a located message (`    file_test.go:42: message`) or free
text such as the continuation lines of a multi-line message.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

PREFIX_LENGTH = 4

START_PREFIX = "=== "
RESULT_PREFIX = "--- "
AGGREGATE_PREFIX = "FAIL"

# '    file_test.go:42: Error Message\n' -> ('file_test.go', '42', 'Error Message')
LOCATED_PATTERN = re.compile(r"^[ \t\n\r\f\v]+([0-9A-Za-z_]+_test\.go):([0-9]+):[ \t\n\r\f\v](.*)\n\Z")


class LineKind(str, Enum):
    SHORT = "short"
    START_MARKER = "start_marker"
    RESULT_MARKER = "result_marker"
    AGGREGATE_MARKER = "aggregate_marker"
    LOCATED_MESSAGE = "located_message"
    FREE_TEXT = "free_text"


@dataclass(frozen=True)
class Classification:
    kind: LineKind
    file: str = ""
    line: str = ""
    message: str = ""


@dataclass(frozen=True)
class LocatedMessage:
    file: str
    line: str
    message: str


def match_located(text: str) -> LocatedMessage | None:
    m = LOCATED_PATTERN.match(text)
    if m is None:
        return None
    return LocatedMessage(file=m.group(1), line=m.group(2), message=m.group(3))


def classify(text: str) -> Classification:
    # Go measures output in UTF-8 bytes.
    if len(text.encode("utf-8", "surrogatepass")) <= PREFIX_LENGTH:
        return Classification(LineKind.SHORT)
    prefix = text[:PREFIX_LENGTH]
    if prefix == START_PREFIX:
        return Classification(LineKind.START_MARKER)
    if prefix == RESULT_PREFIX:
        return Classification(LineKind.RESULT_MARKER)
    if prefix == AGGREGATE_PREFIX:
        return Classification(LineKind.AGGREGATE_MARKER)
    located = match_located(text)
    if located is None:
        return Classification(LineKind.FREE_TEXT, message=text)
    return Classification(LineKind.LOCATED_MESSAGE, file=located.file, line=located.line, message=located.message)
