from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from .env import getenv, getenv_flag

OutputFormat = Literal["text", "json"]

DEFAULT_TEMPLATE = r"{{.Path}}:{{.Line}}: {{.Output}}\n"


@dataclass(frozen=True)
class RunContext:
    template: str
    module: str | None
    output_format: OutputFormat
    log_json: bool
    verbose: bool
    quiet: bool
    cwd: Path
    input_path: str

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        template: str | None = None,
        module: str | None = None,
        json_output: bool = False,
        log_json: bool = False,
        verbose: bool = False,
        quiet: bool = False,
        cwd: Path | None = None,
        input_path: str = "-",
        file_config: dict[str, Any] | None = None,
    ) -> "RunContext":
        # Empty env and config values count as unset; flags are taken as given.
        cfg = file_config or {}
        resolved_template = (
            template if template is not None else getenv("GTFO_FORMAT") or cfg.get("format") or DEFAULT_TEMPLATE
        )
        resolved_module = module if module is not None else getenv("GTFO_MODULE") or cfg.get("module") or None
        env_log_json = getenv_flag("GTFO_LOG_JSON")
        resolved_log_json = log_json or (env_log_json if env_log_json is not None else bool(cfg.get("log_json", False)))
        return cls(
            template=resolved_template,
            module=resolved_module,
            output_format="json" if json_output else "text",
            log_json=resolved_log_json,
            verbose=verbose,
            quiet=quiet,
            cwd=(cwd or Path.cwd()).resolve(),
            input_path=input_path,
        )
