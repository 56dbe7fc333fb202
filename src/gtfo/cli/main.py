from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .. import __version__
from ..config.loader import DEFAULT_CONFIG_NAME, load_config
from ..core.context import DEFAULT_TEMPLATE, RunContext
from ..core.errors import ManifestMissing, ScriptError
from ..core.exit_codes import ERR_INTERNAL, FAILURES_FOUND, OK
from ..formatter.render import prepare
from ..module.resolve import resolve_module
from ..parser.stream import parse
from ..runtime.logging import log_event
from .output import build_payload, emit, render_error
from .source import open_source

USAGE_EPILOG = """\
usage in a pipeline:

  go test -json ./... | gtfo [flags]

template fields: FullPackage, Package, Module, File, FullPath, Path, Line,
Output, Name, Occurrences (e.g. --format '{{.Path}}:{{.Line}}: {{.Output}}\\n').

exit status: 0 when no test failed, 1 when failures were printed.
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gtfo",
        description="Parse `go test -json` output and print failing tests as file:line records.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"gtfo {__version__}")
    p.add_argument(
        "-f",
        "--format",
        dest="template",
        help=f"template applied to each failing test (default: {DEFAULT_TEMPLATE!s}, env: GTFO_FORMAT)",
    )
    p.add_argument("--module", help="module path used to shorten packages (default: read from go.mod)")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--config", help=f"YAML config file (default: {DEFAULT_CONFIG_NAME} when present)")
    p.add_argument("--cwd", help="run from an explicit directory (go.mod and config lookup)")
    p.add_argument("--log-json", action="store_true", help="emit diagnostics as JSON lines on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    p.add_argument("input", nargs="?", default="-", help="go test -json output file (default: stdin)")
    return p


def _resolve_module(ctx: RunContext) -> str:
    if ctx.module is not None:
        return ctx.module
    try:
        return resolve_module(ctx.cwd)
    except ManifestMissing as exc:
        if not ctx.quiet:
            log_event(ctx, "warning", "module", "resolve", error=str(exc), fallback="")
        return ""


def run(ctx: RunContext) -> int:
    module = _resolve_module(ctx)
    format_record = prepare(ctx.template, module)
    with open_source(ctx.input_path, ctx.cwd) as lines:
        records = parse(lines)
    if ctx.verbose:
        log_event(ctx, "info", "parser", "done", records=len(records), module=module)
    rendered = [format_record(record) for record in records]
    if ctx.as_json:
        emit(build_payload(records, rendered, module))
    else:
        sys.stdout.write("".join(rendered))
        sys.stdout.flush()
    return FAILURES_FOUND if records else OK


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    try:
        if ns.cwd:
            os.chdir(ns.cwd)
        cwd = Path.cwd()
        ctx = RunContext.from_args(
            template=ns.template,
            module=ns.module,
            json_output=ns.json,
            log_json=ns.log_json,
            verbose=ns.verbose,
            quiet=ns.quiet,
            cwd=cwd,
            input_path=ns.input,
            file_config=load_config(cwd, ns.config),
        )
    except ScriptError as exc:
        print(render_error(as_json=ns.json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except OSError as exc:
        print(render_error(as_json=ns.json, message=f"unable to enter {ns.cwd}: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL

    try:
        if ctx.verbose:
            log_event(ctx, "info", "cli", "start", input=ctx.input_path, fmt=ctx.output_format, cwd=ctx.cwd)
        rc = run(ctx)
        if ctx.verbose:
            log_event(ctx, "info", "cli", "finish", rc=rc)
        return rc
    except ScriptError as exc:
        print(render_error(as_json=ctx.as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(as_json=ctx.as_json, message=f"internal error: {exc}", code=ERR_INTERNAL),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
