"""Dispatcher: broadcasts lifecycle events to all registered reporters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from runreport.application.reporters._base import ReportContext
from runreport.infrastructure.output_channel import OutputChannel

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from runreport.application.config import RunConfig
    from runreport.application.reporters.protocol import ReporterProtocol
    from runreport.domain.model.flat_test import FlatTest

logger = logging.getLogger(__name__)


class Dispatcher:
    """Invokes each lifecycle callback on every reporter, in registration order.

    Contracts:
        - Every reporter receives every call exactly once
        - Order: registration order, same relative order as received
        - Errors: a failing reporter propagates (fatal), never swallowed
    """

    def __init__(self, config: RunConfig, channel: OutputChannel | None = None) -> None:
        """Initialize dispatcher.

        Args:
            config: Run configuration with the active reporters.
            channel: Output channel. None = built from config.output/config.quiet.
        """
        if channel is None:
            channel = OutputChannel(config.output, quiet=config.quiet)
        self._config = config
        self._context = ReportContext(config=config, channel=channel)
        logger.debug(
            "dispatching to reporters: %s",
            ", ".join(r.reporter_id for r in config.reporters) or "<none>",
        )

    @property
    def reporters(self) -> tuple[ReporterProtocol, ...]:
        """Registered reporters, in call order."""
        return self._config.reporters

    @property
    def context(self) -> ReportContext:
        """Context passed to every callback."""
        return self._context

    def report_all_tests(self, tests: Sequence[FlatTest]) -> None:
        """Invoke report_all_tests on all reporters."""
        for reporter in self._config.reporters:
            reporter.report_all_tests(self._context, tests)

    def report_global_start(self, tests: Sequence[FlatTest]) -> None:
        """Invoke report_global_start on all reporters."""
        for reporter in self._config.reporters:
            reporter.report_global_start(self._context, tests)

    def report_test_start(self, test: FlatTest) -> None:
        """Invoke report_test_start on all reporters."""
        for reporter in self._config.reporters:
            reporter.report_test_start(self._context, test)

    def report_test_result(self, test: FlatTest) -> None:
        """Invoke report_test_result on all reporters."""
        for reporter in self._config.reporters:
            reporter.report_test_result(self._context, test)

    def report_global_results(
        self,
        total_time_ms: int,
        passed: Sequence[FlatTest],
        pending: Sequence[FlatTest],
        failed: Sequence[FlatTest],
        errored: Sequence[FlatTest],
    ) -> None:
        """Invoke report_global_results on all reporters."""
        for reporter in self._config.reporters:
            reporter.report_global_results(
                self._context,
                total_time_ms,
                passed,
                pending,
                failed,
                errored,
            )

    def close(self) -> None:
        """Release the output channel."""
        self._context.channel.close()

    def __enter__(self) -> Self:
        """Enter context: dispatcher is ready."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context: close the output channel."""
        self.close()
