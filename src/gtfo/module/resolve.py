from __future__ import annotations

from pathlib import Path

from ..core.errors import ManifestMissing

MANIFEST_NAME = "go.mod"
MODULE_PREFIX = "module "


def resolve_module(directory: Path | None = None) -> str:
    """Return the module path declared on the first line of `go.mod`.

    `directory` defaults to the working directory the tool was started from.
    """
    manifest = (directory or Path.cwd()) / MANIFEST_NAME
    try:
        with manifest.open("r", encoding="utf-8", errors="replace") as f:
            first = f.readline()
    except OSError as exc:
        raise ManifestMissing(f"unable to read {manifest}: {exc.strerror or exc}") from exc
    return first.rstrip("\r\n").removeprefix(MODULE_PREFIX).strip()
