"""CLI runtime resolution helpers.

This module isolates worker-count clamping and input-list assembly from the
command wiring layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os

from .errors import UsageError
from .parsing import parse_lenient_integer

DEFAULT_THREAD_COUNT = 1
INVALID_THREADS_WARNING = "Invalid argument for -t. Using default number of threads."


@dataclass(frozen=True, slots=True)
class ThreadCountResolution:
    """Effective worker count plus user-facing warnings produced while resolving it."""

    thread_count: int
    warnings: list[str] = field(default_factory=list)
    requested: bool = False


def max_available_threads() -> int:
    """Return the number of parallel execution units available on this host."""

    return os.cpu_count() or 1


def resolve_thread_count(
    raw_value: object,
    max_threads: int | None = None,
) -> ThreadCountResolution:
    """Resolve a requested worker count leniently.

    Non-numeric or non-positive values fall back to the default of one; values
    above the host maximum are reduced to it. Each correction adds a warning.
    """

    limit = max_threads if max_threads is not None else max_available_threads()
    if raw_value is None:
        return ThreadCountResolution(thread_count=DEFAULT_THREAD_COUNT)

    parsed = parse_lenient_integer(raw_value)
    if parsed is None or parsed < 1:
        return ThreadCountResolution(
            thread_count=DEFAULT_THREAD_COUNT,
            warnings=[INVALID_THREADS_WARNING],
            requested=True,
        )

    if parsed > limit:
        return ThreadCountResolution(
            thread_count=limit,
            warnings=[
                f"WARNING: Maximum of {limit} allowed. The program will run using "
                f"{limit} instead of {parsed}"
            ],
            requested=True,
        )
    return ThreadCountResolution(thread_count=parsed, requested=True)


def resolve_input_files(
    files: list[str] | None,
    extra_arguments: list[str] | None,
) -> list[str]:
    """Merge `--files` values with trailing positional names.

    Positional names are only accepted as continuation of `--files`.

    Raises:
        UsageError: If positional names are given without `--files`.
    """

    option_files = list(files or [])
    positional = list(extra_arguments or [])
    if positional and not option_files:
        raise UsageError(
            "Input given without specifying --files (-f) option.",
            hint="Pass input files as `-f <file.txt> [<file.txt> ...]`.",
        )
    return option_files + positional
