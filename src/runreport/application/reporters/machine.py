"""Machine reporter: lifecycle events → encoded structured objects.

No colors, no free text. One encoded object per event, written at INFO.
Sequential and parallel runs produce the same events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from runreport.application.reporters._base import (
    ReporterBinding,
    ignore_global_start,
    require_payload,
)
from runreport.domain.events import (
    TestEndEvent,
    TestListEvent,
    TestResultsEvent,
    TestStartEvent,
)
from runreport.domain.model.enums import ReportLevel
from runreport.domain.model.totals import RunTotals

if TYPE_CHECKING:
    from collections.abc import Sequence

    from runreport.application.reporters._base import ReportContext
    from runreport.domain.events import Event
    from runreport.domain.model.flat_test import FlatTest


def make_test_start_event(test: FlatTest) -> TestStartEvent:
    """Build test-start event keyed by the flat name."""
    return TestStartEvent(test=test, flat_name=test.flat_name)


def make_test_end_event(test: FlatTest) -> TestEndEvent:
    """Build test-end event. Test must carry its payload."""
    require_payload(test)
    return TestEndEvent(test=test, flat_name=test.flat_name)


def make_test_list_event(tests: Sequence[FlatTest]) -> TestListEvent:
    """Build test-list event with (test, flat name) pairs."""
    return TestListEvent(tests=tuple((test, test.flat_name) for test in tests))


def make_test_results_event(
    total_time_ms: int,
    passed: Sequence[FlatTest],
    pending: Sequence[FlatTest],
    failed: Sequence[FlatTest],
    errored: Sequence[FlatTest],
) -> TestResultsEvent:
    """Build test-results event from the four outcome buckets."""
    totals = RunTotals.from_buckets(total_time_ms, passed, pending, failed, errored)
    return TestResultsEvent(totals=totals)


def _report_event(ctx: ReportContext, event: Event) -> None:
    ctx.channel.write_event(ReportLevel.INFO, ctx.config.encoder.encode(event))


def report_all_tests(ctx: ReportContext, tests: Sequence[FlatTest]) -> None:
    """Emit one test-list event."""
    _report_event(ctx, make_test_list_event(tests))


def report_test_start(ctx: ReportContext, test: FlatTest) -> None:
    """Emit test-start event."""
    _report_event(ctx, make_test_start_event(test))


def report_test_result(ctx: ReportContext, test: FlatTest) -> None:
    """Emit test-end event."""
    _report_event(ctx, make_test_end_event(test))


def report_global_results(
    ctx: ReportContext,
    total_time_ms: int,
    passed: Sequence[FlatTest],
    pending: Sequence[FlatTest],
    failed: Sequence[FlatTest],
    errored: Sequence[FlatTest],
) -> None:
    """Emit test-results event."""
    _report_event(ctx, make_test_results_event(total_time_ms, passed, pending, failed, errored))


MACHINE_SEQUENTIAL = ReporterBinding(
    reporter_id="machine-sequential",
    report_all_tests=report_all_tests,
    report_global_start=ignore_global_start,
    report_test_start=report_test_start,
    report_test_result=report_test_result,
    report_global_results=report_global_results,
)

MACHINE_PARALLEL = ReporterBinding(
    reporter_id="machine-parallel",
    report_all_tests=report_all_tests,
    report_global_start=ignore_global_start,
    report_test_start=report_test_start,
    report_test_result=report_test_result,
    report_global_results=report_global_results,
)
