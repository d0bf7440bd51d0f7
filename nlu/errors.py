"""Exceptions raised by the contract query pipeline."""


class PipelineError(RuntimeError):
    """Base class for pipeline failures that must reach the caller."""


class NotInitializedError(PipelineError):
    """Raised when a query is classified before an intent model is loaded."""

    def __init__(self, message: str = "Intent model is not loaded"):
        super().__init__(message)
