from __future__ import annotations


class MarkovModelError(Exception):
    """Base class for errors raised by the character model."""


class InsufficientInputError(MarkovModelError, ValueError):
    """The corpus ended before a full window could be read."""

    def __init__(self, window_length: int, received: int):
        self.window_length = window_length
        self.received = received
        super().__init__(
            f"corpus too short: need at least {window_length} characters, got {received}"
        )


class ModelAlreadyTrainedError(MarkovModelError, RuntimeError):
    """`train` was called on a model that already holds a trained mapping."""


class EmptyTableError(MarkovModelError, ValueError):
    """Probabilities were requested for a table with no entries."""


class ProbabilitiesNotCalculatedError(MarkovModelError, RuntimeError):
    """A table was sampled before its probabilities were calculated."""
