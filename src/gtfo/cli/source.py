from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from ..core.errors import ScriptError
from ..core.exit_codes import ERR_USAGE


def iter_lines(stream: BinaryIO) -> Iterator[str]:
    # Split on "\n" only; a trailing "\r" is dropped by the event decoder.
    for raw in stream:
        yield raw.decode("utf-8", errors="replace")


@contextmanager
def open_source(path: str, cwd: Path) -> Iterator[Iterator[str]]:
    if path == "-":
        yield iter_lines(sys.stdin.buffer)
        return
    target = Path(path)
    if not target.is_absolute():
        target = cwd / target
    try:
        f = target.open("rb")
    except OSError as exc:
        raise ScriptError(f"unable to open input {target}: {exc.strerror or exc}", ERR_USAGE, "input_error") from exc
    with f:
        yield iter_lines(f)
