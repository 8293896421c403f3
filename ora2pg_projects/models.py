"""Result types returned by project store operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CreateStatus(str, Enum):
    """Outcome of creating a project's ``ora2pg.conf``."""
    NOT_FOUND = "NOT-FOUND"
    CONFLICT = "CONFLICT"
    CREATED = "CREATED"


class Outcome(str, Enum):
    """Outcome of a best-effort setup or cleanup operation."""
    SUCCESS = "success"
    ALREADY_DONE = "already-done"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationResult:
    """Explicit result of an operation whose failures are not raised.

    Callers that only care about the happy path may ignore it; others can
    inspect ``ok`` and ``reason``.
    """

    outcome: Outcome
    path: Path
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is not Outcome.FAILED
