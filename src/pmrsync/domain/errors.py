"""Domain error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import BatchResult


class DataIntegrityError(RuntimeError):
    """Raised when the destination collection breaks one of its shape invariants."""


class BatchWriteError(RuntimeError):
    """Raised after a batch submission in which some operations were rejected."""

    def __init__(self, message: str, *, result: BatchResult[object]) -> None:
        super().__init__(message)
        self.result = result
