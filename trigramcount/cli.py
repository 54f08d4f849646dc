"""Command-line interface for trigramcount.

Responsibilities:
- Expose the trigram report command.
- Convert CLI arguments, YAML defaults, and environment values into `TrigramConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_invalid_sources,
    echo_top_sequences,
    echo_warning,
    exit_with_command_error,
)
from .cli_runtime import resolve_input_files, resolve_thread_count
from .config import ConfigLoader, TrigramConfig
from .errors import PipelineStageError
from .pipeline import TrigramPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="trigramcount",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Report the most frequent three-word sequences in text files or standard input.",
    epilog=(
        "Examples: `trigramcount -f file1.txt file2.txt` prints one list for both files; "
        "`trigramcount -f file1.txt file2.txt -t 2` prints one list per file using 2 workers; "
        "`cat file1.txt | trigramcount` reads standard input."
    ),
)


def _load_config(config_file: Path | None) -> TrigramConfig:
    """Load environment defaults, then an optional YAML file, mapping failures to stage errors."""

    try:
        base_config = ConfigLoader.from_env()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `TRIGRAMCOUNT_*` environment variables.",
        ) from exc

    if config_file is None:
        return base_config

    try:
        return ConfigLoader.from_yaml(config_file, base=base_config)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_file}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_file}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    files: list[str] | None,
    extra_arguments: list[str] | None,
    threads: str | None,
    top: int | None,
) -> TrigramConfig:
    """Resolve effective config with precedence CLI > YAML > environment > defaults."""

    cli_files = resolve_input_files(files, extra_arguments)
    loaded_config = _load_config(config_file)
    return TrigramConfig(
        files=cli_files or list(loaded_config.files),
        threads=threads if threads is not None else loaded_config.threads,
        top_n=top if top is not None else loaded_config.top_n,
        encoding=loaded_config.encoding,
        log_level=loaded_config.log_level,
    )


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def report_command(
    extra_arguments: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[FILES]...",
            help="Additional input files; only valid together with `--files`.",
            show_default=False,
        ),
    ] = None,
    files: Annotated[
        list[str] | None,
        typer.Option("--files", "-f", help="Text file to process (repeatable)."),
    ] = None,
    threads: Annotated[
        str | None,
        typer.Option(
            "--threads",
            "-t",
            help="Number of worker processes; files are then reported one by one.",
        ),
    ] = None,
    top: Annotated[
        int | None,
        typer.Option("--top", min=1, help="Number of ranked sequences to print per report."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
) -> None:
    """Print the most frequent three-word sequences of the given input."""

    try:
        config = _resolve_command_config(config_file, files, extra_arguments, threads, top)
        thread_resolution = resolve_thread_count(config.threads)
        for warning in thread_resolution.warnings:
            echo_warning(warning)

        pipeline = TrigramPipeline(
            run_logger=RunLogger(level=config.log_level),
            encoding=config.encoding,
        )
        result = pipeline.run(config.files, thread_resolution.thread_count)
    except Exception as exc:
        exit_with_command_error("trigramcount", exc)

    echo_invalid_sources(result.invalid_files)
    echo_top_sequences(result.results, top_n=config.top_n)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
