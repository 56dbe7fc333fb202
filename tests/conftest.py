from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / ".hypothesis/examples"
settings.register_profile("gtfo", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB), deadline=None)
settings.load_profile("gtfo")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_gtfo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GTFO_FORMAT", "GTFO_MODULE", "GTFO_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def go_module_dir(tmp_path: Path) -> Path:
    root = tmp_path / "gomod"
    root.mkdir()
    (root / "go.mod").write_text("module github.com/nobe4/gtfo\n\ngo 1.21\n", encoding="utf-8")
    return root
