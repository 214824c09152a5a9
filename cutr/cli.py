"""Command-line interface for cutr.

Responsibilities:
- Expose the `cutr` command with field, byte, and character selection modes.
- Resolve settings from CLI options, an optional YAML config, and environment.
- Stream extracted lines from each input to standard output.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Annotated

import typer
import yaml

from .cli_rendering import echo_input_error, exit_with_command_error
from .config import ConfigLoader, CutrConfig, validate_delimiter
from .errors import CommandStageError, SelectionError
from .extract import cut_line
from .io.readers import close_input, iter_lines, open_input
from .models.datatypes import Extract, ExtractMode
from .selection import format_selection
from .telemetry.logger import RunLogger

_COMMAND_NAME = "cutr"
_SELECTION_HINT = "Use positive 1-based positions like `1`, `1,3`, `2-4`, or `1,3-5`."

app = typer.Typer(
    name=_COMMAND_NAME,
    help="Print selected fields, bytes, or characters from each line of input.",
)


def _load_base_config(config_file: Path | None) -> CutrConfig:
    """Load environment defaults and an optional YAML config as stage errors."""

    try:
        defaults = ConfigLoader.from_env()
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Set `CUTR_DELIMITER` to a single-byte character or unset it.",
        ) from exc

    if config_file is None:
        return defaults

    try:
        return ConfigLoader.from_yaml(config_file, defaults=defaults)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except yaml.YAMLError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to parse config file `{config_file}`: {exc}",
            hint="Verify YAML syntax.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_file}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to read config file `{config_file}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_extract(
    fields: str | None,
    bytes_selection: str | None,
    chars: str | None,
    fallback: Extract | None,
) -> Extract:
    """Pick the one selection mode given on the command line or in config."""

    provided = [
        (mode, text)
        for mode, text in (
            (ExtractMode.FIELDS, fields),
            (ExtractMode.BYTES, bytes_selection),
            (ExtractMode.CHARS, chars),
        )
        if text is not None
    ]
    if len(provided) > 1:
        raise CommandStageError(
            stage="arguments",
            detail="Options `--fields`, `--bytes`, and `--chars` are mutually exclusive.",
            hint="Pass exactly one selection option.",
        )
    if not provided:
        if fallback is None:
            raise CommandStageError(
                stage="arguments",
                detail="One of `--fields`, `--bytes`, or `--chars` is required.",
                hint="Example: `cutr -f 1,3-5 data.tsv`.",
            )
        return fallback

    mode, text = provided[0]
    try:
        return Extract.from_selection(mode, text)
    except SelectionError as exc:
        raise CommandStageError(stage="selection", detail=str(exc), hint=_SELECTION_HINT) from exc


def _resolve_command_config(
    config_file: Path | None,
    files: list[str] | None,
    delimiter: str | None,
    fields: str | None,
    bytes_selection: str | None,
    chars: str | None,
) -> tuple[CutrConfig, Extract]:
    """Resolve effective config from CLI overrides, YAML, and environment."""

    base_config = _load_base_config(config_file)
    extract = _resolve_extract(fields, bytes_selection, chars, base_config.extract)

    resolved_delimiter = base_config.delimiter
    if delimiter is not None:
        try:
            resolved_delimiter = validate_delimiter(delimiter)
        except ValueError as exc:
            raise CommandStageError(
                stage="delimiter",
                detail=str(exc),
                hint="Pass a single ASCII character via `--delimiter`.",
            ) from exc

    config = CutrConfig(
        files=list(files) if files else list(base_config.files),
        delimiter=resolved_delimiter,
        extract=extract,
    )
    return config, extract


def _cut_inputs(config: CutrConfig, extract: Extract, run_logger: RunLogger) -> int:
    """Write extracted lines for every input and return the failed input count."""

    failed_inputs = 0
    for name in config.files:
        try:
            handle = open_input(name)
        except OSError as exc:
            failed_inputs += 1
            run_logger.log_stage_failure("input", type(exc).__name__, file=name)
            echo_input_error(name, exc)
            continue

        run_logger.log_stage_start("extract", file=name)
        try:
            for line in iter_lines(handle):
                typer.echo(cut_line(line, extract, config.delimiter))
        except csv.Error as exc:
            failed_inputs += 1
            run_logger.log_stage_failure("extract", type(exc).__name__, file=name)
            echo_input_error(name, exc)
            continue
        finally:
            close_input(handle)
        run_logger.log_stage_complete("extract", file=name)
    return failed_inputs


@app.command()
def cut_command(
    files: Annotated[
        list[str] | None,
        typer.Argument(help="Input files. `-` or no files reads standard input."),
    ] = None,
    delimiter: Annotated[
        str | None,
        typer.Option(
            "--delimiter",
            "-d",
            help="Single-byte field delimiter (default: TAB).",
        ),
    ] = None,
    fields: Annotated[
        str | None,
        typer.Option("--fields", "-f", help="Select only these fields, e.g. `1,3-5`."),
    ] = None,
    bytes_selection: Annotated[
        str | None,
        typer.Option("--bytes", "-b", help="Select only these bytes, e.g. `1,3-5`."),
    ] = None,
    chars: Annotated[
        str | None,
        typer.Option("--chars", "-c", help="Select only these characters, e.g. `1,3-5`."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log stage events to standard error."),
    ] = False,
) -> None:
    """Print selected parts of lines from each input to standard output."""

    run_logger = RunLogger(level="INFO" if verbose else "WARNING")
    try:
        config, extract = _resolve_command_config(
            config_file=config_file,
            files=files,
            delimiter=delimiter,
            fields=fields,
            bytes_selection=bytes_selection,
            chars=chars,
        )
    except Exception as exc:
        exit_with_command_error(_COMMAND_NAME, exc)

    run_logger.log_stage_complete(
        "selection",
        mode=extract.mode.value,
        selection=format_selection(extract.ranges),
    )
    failed_inputs = _cut_inputs(config, extract, run_logger)
    if failed_inputs:
        raise typer.Exit(code=1)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
