"""Human reporter: lifecycle events → colorized text.

Formatting functions are pure (same input, same output).
Callbacks route the formatted text through the output channel:
    test start / passing result  → DEBUG (shown in verbose runs only)
    other results, listings, summary → INFO (always shown)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from runreport.application.reporters._base import (
    ReporterBinding,
    ignore_global_start,
    require_payload,
)
from runreport.domain.model.enums import ColorRole, Outcome, ReportLevel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from runreport.application.reporters._base import ReportContext
    from runreport.domain.model.flat_test import FlatTest
    from runreport.domain.model.result import CallFrame, ResultPayload
    from runreport.domain.ports.colorizer import ColorizerProtocol


# Outcome → (suffix text, color role)
_RESULT_SUFFIXES: dict[Outcome, tuple[str, ColorRole]] = {
    Outcome.PASS: ("+++ OK", ColorRole.TEST_OK),
    Outcome.PENDING: ("^^^ Pending!", ColorRole.PENDING),
    Outcome.FAIL: ("*** Failed!", ColorRole.WARNING),
    Outcome.ERROR: ("@@@ Error!", ColorRole.WARNING),
}


# =============================================================================
# Formatting
# =============================================================================


def human_test_name(test: FlatTest) -> str:
    """Dot-joined path, with " (file:line)" when the location is known."""
    if test.location is None:
        return test.flat_name
    return f"{test.flat_name} ({test.location})"


def ensure_newline(text: str) -> str:
    """Append a newline unless text is empty or already ends with one.

    Trailing spaces after the last newline are ignored.
    """
    if not text or text.rstrip(" ").endswith("\n"):
        return text
    return text + "\n"


def format_call_frame(frame: CallFrame) -> str:
    """Format one frame as '  called from file:line (note)'."""
    line = f"  called from {frame.location}"
    if frame.message is not None:
        line += f" ({frame.message})"
    return line


def attach_call_stack(message: str, callers: Sequence[CallFrame]) -> str:
    """Append call-stack frames to message.

    Frames arrive most recent first and are printed reversed,
    so the outermost call appears last.
    """
    if not callers:
        return message
    lines = [format_call_frame(frame) + "\n" for frame in reversed(callers)]
    return ensure_newline(message) + "".join(lines)


def format_test_start(colors: ColorizerProtocol, test: FlatTest) -> str:
    """Format '[TEST] <name>' header."""
    return colors.colorize(ColorRole.TEST_START, "[TEST] ") + human_test_name(test)


def format_test_result(colors: ColorizerProtocol, payload: ResultPayload) -> str:
    """Format message, call stack, colorized outcome suffix and elapsed time."""
    text, role = _RESULT_SUFFIXES[payload.outcome]
    message = attach_call_stack(payload.message, payload.callers)
    suffix = colors.colorize(role, text)
    return f"{ensure_newline(message)}{suffix} ({payload.wall_time_ms}ms)"


def render_test_names(tests: Sequence[FlatTest], *, indent: int = 0) -> str:
    """Render '* <name>' bullet lines, one per test."""
    prefix = " " * indent
    return "\n".join(f"{prefix}* {human_test_name(test)}" for test in tests)


def format_global_results(
    colors: ColorizerProtocol,
    total_time_ms: int,
    passed: Sequence[FlatTest],
    pending: Sequence[FlatTest],
    failed: Sequence[FlatTest],
    errored: Sequence[FlatTest],
) -> list[str]:
    """Format the end-of-run summary as blocks, one per write.

    Buckets arrive most recent first; listings are reversed back
    to discovery order.

    Returns:
        Tallies block, one block per non-empty bucket, timing block.
    """
    pendings = colors.colorize(ColorRole.PENDING, "* Pending:")
    failures = colors.colorize(ColorRole.WARNING, "* Failures:")
    errors = colors.colorize(ColorRole.WARNING, "* Errors:")
    total = len(passed) + len(pending) + len(failed) + len(errored)

    blocks = [
        f"* Tests:    {total}\n"
        f"* Passed:   {len(passed)}\n"
        f"{pendings}  {len(pending)}\n"
        f"{failures} {len(failed)}\n"
        f"{errors}   {len(errored)}",
    ]

    for heading, bucket in ((pendings, pending), (failures, failed), (errors, errored)):
        if bucket:
            names = render_test_names(list(reversed(bucket)), indent=2)
            blocks.append(f"\n{heading}\n{names}")

    blocks.append(f"\nTotal execution time: {total_time_ms}ms")
    return blocks


# =============================================================================
# Shared callbacks
# =============================================================================


def report_all_tests(ctx: ReportContext, tests: Sequence[FlatTest]) -> None:
    """List all tests as bullets."""
    ctx.channel.write_text(ReportLevel.INFO, render_test_names(tests))


def report_global_results(
    ctx: ReportContext,
    total_time_ms: int,
    passed: Sequence[FlatTest],
    pending: Sequence[FlatTest],
    failed: Sequence[FlatTest],
    errored: Sequence[FlatTest],
) -> None:
    """Print tallies, non-passing test listings and total time."""
    blocks = format_global_results(ctx.colors, total_time_ms, passed, pending, failed, errored)
    for block in blocks:
        ctx.channel.write_text(ReportLevel.INFO, block)


def _report_test_start_message(ctx: ReportContext, level: ReportLevel, test: FlatTest) -> None:
    ctx.channel.write_text(level, format_test_start(ctx.colors, test))


# =============================================================================
# Sequential
# =============================================================================


def report_test_start_sequential(ctx: ReportContext, test: FlatTest) -> None:
    """Announce the test at DEBUG."""
    _report_test_start_message(ctx, ReportLevel.DEBUG, test)


def report_test_result_sequential(ctx: ReportContext, test: FlatTest) -> None:
    """Report the outcome.

    Passing tests are reported at DEBUG. Anything else is reported at INFO;
    in quiet mode the start header was suppressed, so it is repeated first.
    """
    payload = require_payload(test)
    text = format_test_result(ctx.colors, payload)

    if payload.outcome is Outcome.PASS:
        ctx.channel.write_text(ReportLevel.DEBUG, text)
        return

    if ctx.quiet:
        _report_test_start_message(ctx, ReportLevel.INFO, test)
    ctx.channel.write_text(ReportLevel.INFO, text)


# =============================================================================
# Parallel
# =============================================================================


def report_test_start_parallel(ctx: ReportContext, test: FlatTest) -> None:
    """Announce 'Starting <name>' at DEBUG."""
    ctx.channel.write_text(ReportLevel.DEBUG, f"Starting {human_test_name(test)}")


def report_test_result_parallel(ctx: ReportContext, test: FlatTest) -> None:
    """Repeat the header before the result: parallel output interleaves."""
    _report_test_start_message(ctx, ReportLevel.DEBUG, test)
    report_test_result_sequential(ctx, test)


HUMAN_SEQUENTIAL = ReporterBinding(
    reporter_id="human-sequential",
    report_all_tests=report_all_tests,
    report_global_start=ignore_global_start,
    report_test_start=report_test_start_sequential,
    report_test_result=report_test_result_sequential,
    report_global_results=report_global_results,
)

HUMAN_PARALLEL = ReporterBinding(
    reporter_id="human-parallel",
    report_all_tests=report_all_tests,
    report_global_start=ignore_global_start,
    report_test_start=report_test_start_parallel,
    report_test_result=report_test_result_parallel,
    report_global_results=report_global_results,
)
