"""Command-line interface for Text Processor.

Responsibilities:
- Expose the `--statistics`, `--history`, and `--format` actions.
- Resolve configuration, input sources, and output targets for one run.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import emit_result, exit_with_command_error
from .config import ConfigLoader, TextProcessorConfig
from .errors import ConfigError, InvalidArgumentError
from .io.history import HistoryStore
from .io.output import check_output_target
from .io.sources import (
    INTERACTIVE_PROMPT,
    collect_interactive_text,
    file_source,
    resolve_input,
)
from .models.datatypes import InputSource
from .parsing import normalize_optional_string
from .reporting import format_statistics
from .telemetry.logger import RunLogger
from .text.normalizer import TextNormalizer
from .text.statistics import StatisticsCalculator

_CLI_NAME = "text-processor"
_MODES = ("statistics", "history", "format")

app = typer.Typer(
    name=_CLI_NAME,
    add_completion=False,
    help="Text Processor CLI.",
)


def _load_config(
    config_file: Path | None,
    history_file: Path | None,
    verbose: bool,
) -> TextProcessorConfig:
    """Resolve effective config and map failures to config errors."""

    try:
        config = ConfigLoader.resolve(config_file)
    except FileNotFoundError as exc:
        raise ConfigError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ConfigError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix config file or `TEXTPROCESSOR_*` environment values and rerun.",
        ) from exc
    except Exception as exc:
        raise ConfigError(
            stage="config",
            detail=f"Failed to load config file `{config_file}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc

    if history_file is not None:
        config = replace(config, history_file=history_file)
    if verbose:
        config = replace(config, log_level="INFO")
    return config


def _select_mode(statistics: bool, history: bool, format_text: bool) -> str | None:
    """Return the single requested action, or `None` when none was given."""

    selected = [
        name
        for name, enabled in zip(_MODES, (statistics, history, format_text))
        if enabled
    ]
    if len(selected) > 1:
        flags = ", ".join(f"--{name}" for name in selected)
        raise InvalidArgumentError(
            stage="arguments",
            detail=f"Only one action may be given per run, got: {flags}.",
            hint=f"Use `{_CLI_NAME} --help` to list recognized actions.",
        )
    return selected[0] if selected else None


def _read_input_source(input_value: str | None) -> InputSource:
    """Use the given file path, or prompt for text lines when none is given."""

    if input_value is not None:
        return file_source(input_value)
    typer.echo(INTERACTIVE_PROMPT)
    return InputSource.text(collect_interactive_text(typer.get_text_stream("stdin")))


def _run_statistics(
    config: TextProcessorConfig,
    run_logger: RunLogger,
    input_value: str | None,
    output: Path | None,
) -> None:
    """Compute statistics for one input, emit the summary, and record it in history.

    The output target is written before the history file so a failed write
    leaves the history unchanged.
    """

    if output is not None:
        check_output_target(output)

    run_logger.log_stage_start("history-load", path=config.history_file)
    store = HistoryStore.open(config.history_file, encoding=config.encoding)
    run_logger.log_stage_complete("history-load", entries=len(store))

    source = _read_input_source(input_value)
    run_logger.log_stage_start("statistics", source=source.kind.value)
    record = StatisticsCalculator().calculate(resolve_input(source, config.encoding))
    run_logger.log_stage_complete("statistics", words=record.words)

    emit_result(format_statistics(record), output, config.encoding)
    store.add(source, record)
    run_logger.log_stage_complete("history-save", entries=len(store))


def _run_history(
    config: TextProcessorConfig,
    run_logger: RunLogger,
    input_value: str | None,
    output: Path | None,
) -> None:
    """Emit the rendered statistics history."""

    run_logger.log_stage_start("history-load", path=config.history_file)
    store = HistoryStore.open(config.history_file, encoding=config.encoding)
    run_logger.log_stage_complete("history-load", entries=len(store))
    emit_result(store.render(), output, config.encoding)


def _run_format(
    config: TextProcessorConfig,
    run_logger: RunLogger,
    input_value: str | None,
    output: Path | None,
) -> None:
    """Normalize one input and emit the formatted text."""

    source = _read_input_source(input_value)
    run_logger.log_stage_start("format", source=source.kind.value)
    formatted = TextNormalizer().normalize(resolve_input(source, config.encoding))
    run_logger.log_stage_complete("format")
    emit_result(formatted, output, config.encoding)


_RUNNERS = {
    "statistics": _run_statistics,
    "history": _run_history,
    "format": _run_format,
}


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main_command(
    ctx: typer.Context,
    statistics: Annotated[
        bool,
        typer.Option(
            "--statistics",
            help="Print character/word statistics and record them in history.",
        ),
    ] = False,
    history: Annotated[
        bool,
        typer.Option("--history", help="Print all recorded statistics."),
    ] = False,
    format_text: Annotated[
        bool,
        typer.Option("--format", help="Normalize spacing, punctuation, and capitalization."),
    ] = False,
    input_value: Annotated[
        str | None,
        typer.Option(
            "--input",
            "--in",
            help="Input file path. Omit to type text, ending with a blank line.",
        ),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option("--output", "--out", help="Write the result to this file instead of stdout."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with defaults."),
    ] = None,
    history_file: Annotated[
        Path | None,
        typer.Option("--history-file", help="History JSON file (overrides config value)."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log stage events to stderr."),
    ] = False,
) -> None:
    """Analyse or format text. Actions: --statistics, --history, --format."""

    normalized_input = normalize_optional_string(input_value)
    normalized_output = normalize_optional_string(output)

    try:
        mode = _select_mode(statistics, history, format_text)
        if mode is None and (normalized_input is not None or normalized_output is not None):
            raise InvalidArgumentError(
                stage="arguments",
                detail="`--input`/`--output` require an action.",
                hint="Add one of `--statistics`, `--history`, or `--format`.",
            )
    except InvalidArgumentError as exc:
        exit_with_command_error(_CLI_NAME, exc)

    if mode is None:
        typer.echo(ctx.get_help())
        return

    try:
        config = _load_config(config_file, history_file, verbose)
    except ConfigError as exc:
        exit_with_command_error(mode, exc)

    run_logger = RunLogger(level=config.log_level)
    try:
        _RUNNERS[mode](
            config,
            run_logger,
            normalized_input,
            Path(normalized_output) if normalized_output is not None else None,
        )
    except Exception as exc:
        stage = getattr(exc, "stage", mode)
        run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error(mode, exc)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
