"""Top-level package for trigramcount.

This package normalizes plain-text sources and reports the most frequent
three-word sequences. The main orchestration entry point is `TrigramPipeline`.
"""

from .pipeline import TrigramPipeline

__all__ = ["TrigramPipeline", "__version__"]

__version__ = "0.1.0"
