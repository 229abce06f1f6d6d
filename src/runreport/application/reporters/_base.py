"""Reporter binding and the context passed to every callback.

A binding is a value: an identifier plus five callables.
Variants are instances, selected by a pure function (see selection.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from runreport.application.config import RunConfig
    from runreport.application.reporters.types import (
        ReportAllTests,
        ReportGlobalResults,
        ReportGlobalStart,
        ReportTestResult,
        ReportTestStart,
    )
    from runreport.domain.model.flat_test import FlatTest
    from runreport.domain.model.result import ResultPayload
    from runreport.domain.ports.colorizer import ColorizerProtocol
    from runreport.infrastructure.output_channel import OutputChannel


@dataclass(frozen=True, slots=True)
class ReportContext:
    """Explicit environment of a reporter callback.

    Attributes:
        config: Run configuration.
        channel: Output channel shared by all reporters of the run.
    """

    config: RunConfig
    channel: OutputChannel

    @property
    def quiet(self) -> bool:
        """True if the channel drops DEBUG messages.

        Read from the channel so the gate and the header repeat agree.
        """
        return self.channel.quiet

    @property
    def colors(self) -> ColorizerProtocol:
        """Color service of the run."""
        return self.config.colors


@dataclass(frozen=True, slots=True)
class ReporterBinding:
    """Reporter made of five callbacks. Satisfies ReporterProtocol.

    Attributes:
        reporter_id: Identifier, e.g. "human-sequential".
        report_all_tests: Discovery listing.
        report_global_start: Start of run.
        report_test_start: Start of one test.
        report_test_result: Result of one test.
        report_global_results: End-of-run summary.
    """

    reporter_id: str
    report_all_tests: ReportAllTests
    report_global_start: ReportGlobalStart
    report_test_start: ReportTestStart
    report_test_result: ReportTestResult
    report_global_results: ReportGlobalResults


def ignore_global_start(ctx: ReportContext, tests: Sequence[FlatTest]) -> None:  # noqa: ARG001
    """Global start callback that reports nothing."""


def require_payload(test: FlatTest) -> ResultPayload:
    """Get the result payload of a finished test.

    Raises:
        ValueError: Test carries no payload.
    """
    if test.payload is None:
        raise ValueError(f"test has no result payload: {test.flat_name}")
    return test.payload
