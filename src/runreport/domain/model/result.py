"""Result payload attached to a completed test."""

from __future__ import annotations

from dataclasses import dataclass

from runreport.domain.exceptions import NegativeDurationError
from runreport.domain.model.enums import Outcome
from runreport.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class CallFrame:
    """One "called from" entry of a result's call stack.

    Attributes:
        message: Optional annotation for this frame
        location: Where the call happened
    """

    message: str | None
    location: Location


@dataclass(frozen=True, slots=True)
class ResultPayload:
    """Outcome of one test with everything needed to render it.

    Attributes:
        outcome: Pass, pending, fail or error
        message: Human message produced by the test
        callers: Call stack, most recently pushed frame first
        wall_time_ms: Elapsed wall time in milliseconds
    """

    outcome: Outcome
    message: str
    callers: tuple[CallFrame, ...] = ()
    wall_time_ms: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.outcome, Outcome):
            raise TypeError(f"outcome must be Outcome, got {type(self.outcome).__name__}")
        if self.wall_time_ms < 0:
            raise NegativeDurationError(self.wall_time_ms)
