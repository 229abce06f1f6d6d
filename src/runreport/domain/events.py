"""Structured event shapes for machine-readable output.

One event per reported lifecycle step. All objects frozen.
The encoder turns them into bytes; framing is the encoder's concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from runreport.domain.model.flat_test import FlatTest
from runreport.domain.model.result import ResultPayload
from runreport.domain.model.totals import RunTotals


class EventType(Enum):
    """Wire names of machine events."""

    TEST_START = "test-start"
    TEST_END = "test-end"
    TEST_LIST = "test-list"
    TEST_RESULTS = "test-results"


@dataclass(frozen=True, slots=True)
class TestStartEvent:
    """A test is about to run."""

    __test__ = False

    test: FlatTest
    flat_name: str


@dataclass(frozen=True, slots=True)
class TestEndEvent:
    """A test finished. The test carries its result payload."""

    __test__ = False

    test: FlatTest
    flat_name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.test.payload is None:
            raise ValueError(f"test-end event needs a result payload: {self.flat_name}")

    @property
    def payload(self) -> ResultPayload:
        """Result payload of the finished test."""
        payload = self.test.payload
        if payload is None:
            raise ValueError(f"test-end event needs a result payload: {self.flat_name}")
        return payload


@dataclass(frozen=True, slots=True)
class TestListEvent:
    """All tests of the run with their flat names."""

    __test__ = False

    tests: tuple[tuple[FlatTest, str], ...]


@dataclass(frozen=True, slots=True)
class TestResultsEvent:
    """Aggregate tallies at the end of the run."""

    __test__ = False

    totals: RunTotals


Event = TestStartEvent | TestEndEvent | TestListEvent | TestResultsEvent


def get_event_type(event: Event) -> EventType:
    """Get EventType for event.

    Exhaustive match on Event union. Type system ensures all cases covered.
    """
    match event:
        case TestStartEvent():
            return EventType.TEST_START
        case TestEndEvent():
            return EventType.TEST_END
        case TestListEvent():
            return EventType.TEST_LIST
        case TestResultsEvent():
            return EventType.TEST_RESULTS
