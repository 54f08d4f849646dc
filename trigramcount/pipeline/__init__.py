"""Coordinator package for trigram runs."""

from .orchestrator import TrigramPipeline, select_mode

__all__ = ["TrigramPipeline", "select_mode"]
