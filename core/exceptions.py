# core/exceptions.py
from __future__ import annotations

from typing import List, Optional


class StoreError(RuntimeError):
    """Any failure talking to the customers store (network, constraint, timeout)."""

    def __init__(self, action: str, cause: Optional[BaseException] = None) -> None:
        self.action = action
        self.cause = cause
        super().__init__(f"{action} failed: {cause!r}" if cause else f"{action} failed")


class FormValidationError(ValueError):
    """Required form field empty (or amount not a number). Never reaches the store."""

    def __init__(self, missing: List[str], message: str) -> None:
        self.missing = missing
        super().__init__(message)


class InvalidActionError(RuntimeError):
    """Action not available in the current mode (e.g. delete while adding)."""
