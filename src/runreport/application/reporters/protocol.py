"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from runreport.application.reporters._base import ReportContext
    from runreport.domain.model.flat_test import FlatTest


class ReporterProtocol(Protocol):
    """Protocol for test lifecycle reporters.

    Five callbacks, one per lifecycle event. No return values.
    Output goes through ctx.channel, never print().
    Built-in bindings and user reporters implement same interface.
    """

    @property
    def reporter_id(self) -> str:
        """Identifier of the reporter."""
        ...

    def report_all_tests(self, ctx: ReportContext, tests: Sequence[FlatTest]) -> None:
        """Report the full set of discovered tests.

        Args:
            ctx: Run context (config and output channel).
            tests: All tests, in discovery order.
        """
        ...

    def report_global_start(self, ctx: ReportContext, tests: Sequence[FlatTest]) -> None:
        """Report the start of the run.

        Args:
            ctx: Run context.
            tests: Tests about to run.
        """
        ...

    def report_test_start(self, ctx: ReportContext, test: FlatTest) -> None:
        """Report that a test starts.

        Args:
            ctx: Run context.
            test: Test without payload.
        """
        ...

    def report_test_result(self, ctx: ReportContext, test: FlatTest) -> None:
        """Report the result of a test.

        Args:
            ctx: Run context.
            test: Test carrying its ResultPayload.
        """
        ...

    def report_global_results(
        self,
        ctx: ReportContext,
        total_time_ms: int,
        passed: Sequence[FlatTest],
        pending: Sequence[FlatTest],
        failed: Sequence[FlatTest],
        errored: Sequence[FlatTest],
    ) -> None:
        """Report the end-of-run summary.

        Buckets are accumulated most recent first.

        Args:
            ctx: Run context.
            total_time_ms: Wall time of the whole run.
            passed: Passed tests.
            pending: Pending tests.
            failed: Failed tests.
            errored: Errored tests.
        """
        ...
