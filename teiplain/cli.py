"""Command-line interface for teiplain.

Responsibilities:
- Expose user-facing commands for rendering TEI sources to plain text.
- Convert CLI arguments into `TeiplainConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_rendered_text,
    echo_teaser,
    echo_write_summary,
    exit_with_command_error,
)
from .config import ConfigLoader, TeiplainConfig
from .errors import ConversionStageError
from .parsing import normalize_locale
from .pipeline import TeiTextPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="teiplain",
    no_args_is_help=True,
    help="Render TEI editorial markup to plain text.",
)

InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to TEI XML source. Required unless provided by `--config`."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
LocaleOption = Annotated[
    str | None,
    typer.Option("--locale", help="Quotation locale: `de`, `en`, or any other code for straight quotes."),
]
ElementOption = Annotated[
    str | None,
    typer.Option(
        "--element",
        help="Render every element with this local name (e.g. `p`) instead of the whole document.",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Log stage events to stderr."),
]


def _load_yaml_config(config_path: Path | None) -> TeiplainConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ConversionStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ConversionStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise ConversionStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    input_path: Path | None,
    out: Path | None = None,
    locale: str | None = None,
    element: str | None = None,
    normalize: bool | None = None,
    max_length: int | None = None,
) -> TeiplainConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded = _load_yaml_config(config_file)
    if loaded is None:
        if input_path is None:
            raise ConversionStageError(
                stage="config",
                detail="Input path is required when `--config` is not provided.",
                hint="Pass `<input.xml>` or use `--config <path.yaml>` with `input_path`.",
            )
        loaded = TeiplainConfig(input_path=input_path)

    resolved_locale = normalize_locale(locale) if locale is not None else loaded.locale
    return TeiplainConfig(
        input_path=input_path if input_path is not None else loaded.input_path,
        output_path=out if out is not None else loaded.output_path,
        locale=resolved_locale,
        max_length=max_length if max_length is not None else loaded.max_length,
        element=element if element is not None else loaded.element,
        normalize=normalize if normalize is not None else loaded.normalize,
    )


@app.command("render")
def render_command(
    input_path: InputArgument = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write rendered text to this file instead of stdout."),
    ] = None,
    config_file: ConfigOption = None,
    locale: LocaleOption = None,
    element: ElementOption = None,
    normalize: Annotated[
        bool | None,
        typer.Option(
            "--normalize/--no-normalize",
            help="Collapse whitespace and apply NFC normalization to the rendered text.",
        ),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Render a TEI source to plain text."""

    try:
        config = _resolve_config(
            config_file=config_file,
            input_path=input_path,
            out=out,
            locale=locale,
            element=element,
            normalize=normalize,
        )
        config.max_length = None
        pipeline = TeiTextPipeline(run_logger=RunLogger() if verbose else None)
        result = pipeline.run(config)
    except Exception as exc:
        exit_with_command_error("render", exc)

    if config.output_path is not None:
        echo_write_summary(result, str(config.output_path))
        return
    echo_rendered_text(result)


@app.command("teaser")
def teaser_command(
    input_path: InputArgument = None,
    max_length: Annotated[
        int | None,
        typer.Option(
            "--max-length",
            min=0,
            help="Maximum teaser length in characters before the ellipsis.",
        ),
    ] = None,
    config_file: ConfigOption = None,
    locale: LocaleOption = None,
    element: ElementOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Render a TEI source and print a word-boundary-safe teaser."""

    try:
        config = _resolve_config(
            config_file=config_file,
            input_path=input_path,
            locale=locale,
            element=element,
            max_length=max_length,
        )
        if config.max_length is None:
            raise ConversionStageError(
                stage="config",
                detail="Teaser length is required.",
                hint="Pass `--max-length <n>` or set `max_length` in the config file.",
            )
        config.output_path = None
        pipeline = TeiTextPipeline(run_logger=RunLogger() if verbose else None)
        result = pipeline.run(config)
    except Exception as exc:
        exit_with_command_error("teaser", exc)

    echo_teaser(result)


def main() -> None:
    """Run the Typer CLI application."""

    app()
