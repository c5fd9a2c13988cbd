"""Engine exception types.

Use-cases raise these so callers (scripts, the backend) can tell a bad request
apart from bad data or an unexpected failure inside one fold.
"""

from __future__ import annotations

from typing import Optional


class CrossFrameError(Exception):
    """Base class for all engine errors.

    ``fold_id`` is set when the error was raised while fitting or applying a
    per-fold encoding.
    """

    fold_id: Optional[int] = None

    def __str__(self) -> str:
        msg = super().__str__()
        if self.fold_id is not None:
            return f"[fold {self.fold_id}] {msg}"
        return msg


class ConfigurationError(CrossFrameError, ValueError):
    """Invalid fold count, missing outcome/input/group column, bad treatment options."""


class DataError(CrossFrameError, ValueError):
    """Unusable column data (entirely missing, constant, bad outcome values)."""


class FoldError(CrossFrameError):
    """Unexpected failure inside a single fold's fit/apply step."""

    def __init__(self, fold_id: int, message: str):
        super().__init__(message)
        self.fold_id = fold_id


class PlanArtifactError(CrossFrameError):
    """Raised when a serialized treatment plan fails validation."""
