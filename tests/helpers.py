from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
FIXTURES_ROOT = ROOT / "tests/fixtures"
PKG = "github.com/nobe4/gtfo/build/tests/stuff"
MODULE = "github.com/nobe4/gtfo"


def event_line(action: str, package: str = "", test: str = "", output: str = "") -> str:
    payload: dict[str, str] = {"Time": "2026-10-18T09:00:00Z", "Action": action}
    if package:
        payload["Package"] = package
    if test:
        payload["Test"] = test
    if output:
        payload["Output"] = output
    return json.dumps(payload) + "\n"


def fixture_lines(name: str) -> list[str]:
    return (FIXTURES_ROOT / name).read_text(encoding="utf-8").splitlines(keepends=True)


def run_gtfo(*args: str, stdin: str = "", cwd: Path | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    run_env = os.environ.copy()
    run_env["PYTHONPATH"] = str(ROOT / "src")
    for name in ("GTFO_FORMAT", "GTFO_MODULE", "GTFO_LOG_JSON"):
        run_env.pop(name, None)
    run_env.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", "gtfo", *args],
        cwd=(cwd or ROOT),
        env=run_env,
        input=stdin,
        text=True,
        capture_output=True,
        check=False,
    )
