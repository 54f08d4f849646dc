"""Work partitioning and worker units for parallel file processing."""

from .partition import split_into_chunks
from .worker import process_chunk

__all__ = ["process_chunk", "split_into_chunks"]
