"""Core datatypes shared across trigramcount modules.

Responsibilities:
- Represent immutable records exchanged between workers and the coordinator.
- Stay picklable so results can cross process-pool boundaries.

Key types:
- `FileResult`, `WorkerOutput`, `RunResult`, and `ProcessingMode`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

RankedSequences = list[tuple[str, int]]


class ProcessingMode(str, Enum):
    """Coordinator strategy used for one run."""

    FILES_AS_ONE = "files_as_one"
    FILES_IN_PARALLEL = "files_in_parallel"
    STREAM = "stream"


@dataclass(frozen=True, slots=True)
class FileResult:
    """Ranked trigram frequencies for one logical unit of text.

    Attributes:
        source: A single path, `"stdin"`, or the ordered paths of a concatenated unit.
        sequences: Trigrams with counts, sorted by count descending.
        valid: Whether the source passed the input filter.
    """

    source: str | tuple[str, ...]
    sequences: RankedSequences
    valid: bool = True

    @property
    def label(self) -> str:
        """Return the source name used in report headers."""

        if isinstance(self.source, tuple):
            return ",".join(self.source)
        return self.source


@dataclass(frozen=True, slots=True)
class WorkerOutput:
    """Self-contained result of one worker unit.

    Attributes:
        invalid_files: Chunk entries rejected by the input filter, in chunk order.
        results: One `FileResult` per accepted entry, in chunk order.
    """

    invalid_files: list[str] = field(default_factory=list)
    results: list[FileResult] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RunResult:
    """Merged coordinator output for one run.

    Attributes:
        mode: Strategy that produced the results.
        results: Ordered units to report.
        invalid_files: Rejected inputs aggregated across the whole run.
        thread_count: Worker count used (1 for inline modes).
    """

    mode: ProcessingMode
    results: list[FileResult]
    invalid_files: list[str] = field(default_factory=list)
    thread_count: int = 1
