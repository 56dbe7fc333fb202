"""gtfo CLI package."""

from __future__ import annotations

import argparse
from importlib import import_module

__all__ = ["build_parser"]


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = import_module("gtfo.cli.main").build_parser()
    return parser
