"""Pipeline orchestration for trigram runs.

Responsibilities:
- Select the processing mode for a set of inputs.
- Run inline modes (files concatenated as one unit, standard input).
- Fan chunks of files out to a process pool and merge results in dispatch order.

Key types:
- `TrigramPipeline`: orchestration facade.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor, Future, ProcessPoolExecutor
import sys
from typing import TextIO

from ..errors import PipelineStageError
from ..io.sources import is_valid_source, read_source_text, read_stream_lines
from ..models.datatypes import FileResult, ProcessingMode, RunResult, WorkerOutput
from ..parallel.partition import split_into_chunks
from ..parallel.worker import process_chunk
from ..telemetry.logger import RunLogger
from ..text.counting import analyze_text
from ..text.normalizer import TextNormalizer
from .telemetry import PipelineTelemetryMixin

STDIN_SOURCE = "stdin"

ExecutorFactory = Callable[[int], Executor]


def _process_pool(max_workers: int) -> Executor:
    return ProcessPoolExecutor(max_workers=max_workers)


def select_mode(files: list[str], thread_count: int) -> ProcessingMode:
    """Pick the coordinator strategy for the given inputs.

    More than one worker with explicit files runs files in parallel, explicit
    files alone are concatenated into one unit, and no files means stdin.
    """

    if files and thread_count > 1:
        return ProcessingMode.FILES_IN_PARALLEL
    if files:
        return ProcessingMode.FILES_AS_ONE
    return ProcessingMode.STREAM


class TrigramPipeline(PipelineTelemetryMixin):
    """Coordinate normalization, counting, and worker fan-out for one run."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        encoding: str = "utf-8",
        executor_factory: ExecutorFactory = _process_pool,
    ) -> None:
        """Initialize optional runtime logging, input encoding, and worker pool factory."""

        self._run_logger = run_logger
        self._encoding = encoding
        self._executor_factory = executor_factory
        self._normalizer = TextNormalizer()

    def run(
        self,
        files: list[str],
        thread_count: int = 1,
        stream: TextIO | None = None,
    ) -> RunResult:
        """Run the mode selected for `files` and `thread_count`."""

        mode = select_mode(files, thread_count)
        if mode is ProcessingMode.FILES_IN_PARALLEL:
            return self.process_files_in_parallel(files, thread_count)
        if mode is ProcessingMode.FILES_AS_ONE:
            return self.process_files_as_one(files)
        return self.process_stream(stream if stream is not None else sys.stdin)

    def process_files_as_one(self, files: list[str]) -> RunResult:
        """Concatenate every accepted file into one unit and rank its trigrams."""

        invalid_files = [name for name in files if not is_valid_source(name)]
        valid_files = [name for name in files if is_valid_source(name)]

        texts = self._run_stage(
            "read",
            lambda: [self._read_normalized(name) for name in valid_files],
            files=len(valid_files),
        )
        text = " ".join(part for part in texts if part)
        sequences = self._run_stage("count", lambda: analyze_text(text))

        return RunResult(
            mode=ProcessingMode.FILES_AS_ONE,
            results=[FileResult(source=tuple(files), sequences=sequences)],
            invalid_files=invalid_files,
        )

    def process_files_in_parallel(self, files: list[str], thread_count: int) -> RunResult:
        """Split files over `thread_count` workers and merge their outputs in chunk order."""

        chunks = split_into_chunks(files, thread_count)
        outputs = self._run_stage(
            "dispatch",
            lambda: self._dispatch(chunks, thread_count),
            workers=thread_count,
            files=len(files),
        )

        invalid_files: list[str] = []
        results: list[FileResult] = []
        for output in outputs:
            invalid_files.extend(output.invalid_files)
            results.extend(output.results)

        return RunResult(
            mode=ProcessingMode.FILES_IN_PARALLEL,
            results=results,
            invalid_files=invalid_files,
            thread_count=thread_count,
        )

    def process_stream(self, stream: TextIO) -> RunResult:
        """Normalize a text stream line by line and rank its trigrams."""

        lines = self._run_stage("read", lambda: read_stream_lines(stream), source=STDIN_SOURCE)
        text = self._normalizer.normalize_lines(lines)
        sequences = self._run_stage("count", lambda: analyze_text(text))
        return RunResult(
            mode=ProcessingMode.STREAM,
            results=[FileResult(source=STDIN_SOURCE, sequences=sequences)],
        )

    def _read_normalized(self, name: str) -> str:
        """Read one accepted file and normalize it, mapping failures to a stage error."""

        try:
            raw_text = read_source_text(name, encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise PipelineStageError(
                stage="read",
                detail=f"Failed to read input file `{name}`: {exc}",
                hint="Verify every `.txt` input exists and is readable text.",
            ) from exc
        return self._normalizer.normalize(raw_text)

    def _dispatch(self, chunks: list[list[str]], thread_count: int) -> list[WorkerOutput]:
        """Run one worker per chunk and wait for all of them.

        Results are collected in submission order. The first failure cancels
        workers that have not started and aborts the run.
        """

        with self._executor_factory(thread_count) as executor:
            futures: list[Future[WorkerOutput]] = [
                executor.submit(process_chunk, chunk, self._encoding) for chunk in chunks
            ]
            try:
                return [future.result() for future in futures]
            except Exception as exc:
                for future in futures:
                    future.cancel()
                raise PipelineStageError(
                    stage="worker",
                    detail=f"Worker failed while processing files: {exc}",
                    hint="Verify every `.txt` input exists and is readable text.",
                ) from exc
