"""Worker unit executed inside a process pool.

A worker owns one chunk of input names, processes it sequentially, and returns
a self-contained `WorkerOutput`. Read failures are not caught here: they
propagate to the coordinator, which aborts the whole run.
"""

from __future__ import annotations

from ..io.sources import is_valid_source, read_source_text
from ..models.datatypes import FileResult, WorkerOutput
from ..text.counting import analyze_text
from ..text.normalizer import format_text


def process_chunk(chunk: list[str], encoding: str = "utf-8") -> WorkerOutput:
    """Filter, read, normalize, count, and rank every file of one chunk.

    Args:
        chunk: Input names owned by this worker, in dispatch order.
        encoding: Text encoding used to read accepted files.

    Returns:
        Rejected names and per-file results, both in chunk order.
    """

    output = WorkerOutput()
    for name in chunk:
        if not is_valid_source(name):
            output.invalid_files.append(name)
            continue
        text = format_text(read_source_text(name, encoding=encoding))
        output.results.append(FileResult(source=name, sequences=analyze_text(text)))
    return output
