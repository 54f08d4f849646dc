"""Shared typed data models for trigramcount.

This package contains dataclasses exchanged between the coordinator, worker
processes, and CLI rendering.
"""

from .datatypes import FileResult, ProcessingMode, RankedSequences, RunResult, WorkerOutput

__all__ = [
    "FileResult",
    "ProcessingMode",
    "RankedSequences",
    "RunResult",
    "WorkerOutput",
]
