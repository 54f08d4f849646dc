"""Domain exceptions for pipeline and CLI diagnostics."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class UsageError(PipelineStageError):
    """Raised when command-line inputs are combined in an unsupported way."""

    def __init__(self, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="usage", detail=detail, hint=hint)
