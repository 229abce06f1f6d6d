"""Public entry point: build a dispatcher from the run knobs.

Usage:
    with reporting(parallel=True, split_prefix="out/report-") as dispatcher:
        dispatcher.report_global_start(tests)
        ...
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

from runreport.application.config import RunConfig
from runreport.application.reporters.selection import default_reporters
from runreport.application.services.dispatcher import Dispatcher
from runreport.domain.model.output import OutputSplit, OutputStream
from runreport.infrastructure.colors import PlainColorizer, colorizer_for
from runreport.infrastructure.json_encoder import JsonEventEncoder

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import BinaryIO

    from runreport.application.reporters.protocol import ReporterProtocol
    from runreport.domain.model.output import OutputDestination
    from runreport.domain.ports.colorizer import ColorizerProtocol
    from runreport.domain.ports.encoder import EventEncoderProtocol


def _resolve_output(
    stream: BinaryIO | None,
    split_prefix: str | None,
    *,
    close_stream: bool,
) -> OutputDestination:
    """Split prefix wins over stream. No stream = stdout."""
    if split_prefix is not None:
        return OutputSplit(prefix=split_prefix)
    if stream is None:
        return OutputStream(stream=sys.stdout.buffer, close_when_done=False)
    return OutputStream(stream=stream, close_when_done=close_stream)


def _resolve_colors(output: OutputDestination, *, machine_output: bool) -> ColorizerProtocol:
    """Colors only for human output on a color-capable stream."""
    match output:
        case OutputStream(stream=stream) if not machine_output:
            return colorizer_for(stream)
        case _:
            return PlainColorizer()


def create_dispatcher(
    *,
    parallel: bool = False,
    machine_output: bool = False,
    quiet: bool = False,
    stream: BinaryIO | None = None,
    split_prefix: str | None = None,
    close_stream: bool = False,
    colors: ColorizerProtocol | None = None,
    encoder: EventEncoderProtocol | None = None,
    extra_reporters: Sequence[ReporterProtocol] = (),
) -> Dispatcher:
    """Build a dispatcher with the default reporter for the run knobs.

    Args:
        parallel: Tests run in parallel.
        machine_output: Produce machine-readable output.
        quiet: Drop DEBUG messages.
        stream: Shared binary stream. None = sys.stdout.buffer.
        split_prefix: Write each message to its own file <prefix><n>.
            Takes precedence over stream.
        close_stream: Close stream when the dispatcher is closed.
        colors: Color service. None = detected from the stream.
        encoder: Machine event encoder. None = JsonEventEncoder.
        extra_reporters: Reporters called after the default one.

    Returns:
        Dispatcher ready for the five lifecycle operations.
    """
    output = _resolve_output(stream, split_prefix, close_stream=close_stream)
    config = RunConfig(
        reporters=default_reporters(parallel, machine_output) + tuple(extra_reporters),
        output=output,
        quiet=quiet,
        colors=(
            colors if colors is not None else _resolve_colors(output, machine_output=machine_output)
        ),
        encoder=encoder if encoder is not None else JsonEventEncoder(),
    )
    return Dispatcher(config)


@contextmanager
def reporting(
    *,
    parallel: bool = False,
    machine_output: bool = False,
    quiet: bool = False,
    stream: BinaryIO | None = None,
    split_prefix: str | None = None,
    close_stream: bool = False,
    colors: ColorizerProtocol | None = None,
    encoder: EventEncoderProtocol | None = None,
    extra_reporters: Sequence[ReporterProtocol] = (),
) -> Iterator[Dispatcher]:
    """Context manager around create_dispatcher(). Closes the dispatcher on exit."""
    dispatcher = create_dispatcher(
        parallel=parallel,
        machine_output=machine_output,
        quiet=quiet,
        stream=stream,
        split_prefix=split_prefix,
        close_stream=close_stream,
        colors=colors,
        encoder=encoder,
        extra_reporters=extra_reporters,
    )
    try:
        yield dispatcher
    finally:
        dispatcher.close()
