"""Aggregate tallies of a finished run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from runreport.domain.exceptions import NegativeCountError, NegativeDurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from runreport.domain.model.flat_test import FlatTest


@dataclass(frozen=True, slots=True)
class RunTotals:
    """Counts per outcome plus total wall time.

    Derived from the four outcome buckets accumulated by the engine.
    Buckets are only read, never mutated.
    """

    passed: int
    pending: int
    failed: int
    errored: int
    total_time_ms: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("passed", "pending", "failed", "errored"):
            value = getattr(self, name)
            if value < 0:
                raise NegativeCountError(name, value)
        if self.total_time_ms < 0:
            raise NegativeDurationError(self.total_time_ms)

    @property
    def total(self) -> int:
        """Number of tests across all outcomes."""
        return self.passed + self.pending + self.failed + self.errored

    @classmethod
    def from_buckets(
        cls,
        total_time_ms: int,
        passed: Sequence[FlatTest],
        pending: Sequence[FlatTest],
        failed: Sequence[FlatTest],
        errored: Sequence[FlatTest],
    ) -> RunTotals:
        """Count the four outcome buckets."""
        return cls(
            passed=len(passed),
            pending=len(pending),
            failed=len(failed),
            errored=len(errored),
            total_time_ms=total_time_ms,
        )
