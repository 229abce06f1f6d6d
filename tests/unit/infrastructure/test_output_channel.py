"""Tests for OutputChannel.

Tests:
- Quiet filtering (DEBUG dropped, INFO passes)
- Shared-stream routing of text, bytes and events
- Split mode file naming, index counter, cleanup on error
- Write failures surface as ReportWriteError
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, BinaryIO

import pytest

from runreport.domain.exceptions import ReportWriteError
from runreport.domain.model import OutputSplit, OutputStream, ReportLevel
from runreport.infrastructure.output_channel import OutputChannel

if TYPE_CHECKING:
    from pathlib import Path


class TestQuietFiltering:
    """Tests for the quiet/level gate."""

    def test_debug_dropped_when_quiet(self) -> None:
        """DEBUG write with quiet=True produces zero output."""
        stream = io.BytesIO()
        channel = OutputChannel(OutputStream(stream), quiet=True)
        channel.write_text(ReportLevel.DEBUG, "hidden")
        assert stream.getvalue() == b""

    def test_debug_written_when_not_quiet(self) -> None:
        """Same DEBUG write with quiet=False produces output."""
        stream = io.BytesIO()
        channel = OutputChannel(OutputStream(stream), quiet=False)
        channel.write_text(ReportLevel.DEBUG, "shown")
        assert stream.getvalue() == b"shown\n"

    def test_info_written_when_quiet(self) -> None:
        """INFO always passes."""
        stream = io.BytesIO()
        channel = OutputChannel(OutputStream(stream), quiet=True)
        channel.write_text(ReportLevel.INFO, "always")
        assert stream.getvalue() == b"always\n"

    def test_render_not_called_when_dropped(self) -> None:
        """Dropped messages are never rendered."""
        calls: list[BinaryIO] = []
        channel = OutputChannel(OutputStream(io.BytesIO()), quiet=True)
        channel.write(ReportLevel.DEBUG, calls.append)
        assert calls == []

    def test_is_enabled(self) -> None:
        """is_enabled reflects the gate."""
        channel = OutputChannel(OutputStream(io.BytesIO()), quiet=True)
        assert not channel.is_enabled(ReportLevel.DEBUG)
        assert channel.is_enabled(ReportLevel.INFO)

    def test_quiet_dropped_split_write_takes_no_index(self, tmp_path: Path) -> None:
        """Suppressed writes create no file and keep the counter."""
        channel = OutputChannel(OutputSplit(str(tmp_path / "r")), quiet=True)
        channel.write_text(ReportLevel.DEBUG, "hidden")
        assert channel.next_index == 0
        assert list(tmp_path.iterdir()) == []


class TestStreamMode:
    """Tests for shared-stream routing."""

    def test_text_gets_single_newline(self) -> None:
        """write_text appends exactly one newline."""
        stream = io.BytesIO()
        channel = OutputChannel(OutputStream(stream))
        channel.write_text(ReportLevel.INFO, "a")
        channel.write_text(ReportLevel.INFO, "b")
        assert stream.getvalue() == b"a\nb\n"

    def test_text_is_utf8(self) -> None:
        """Text is encoded as UTF-8."""
        stream = io.BytesIO()
        OutputChannel(OutputStream(stream)).write_text(ReportLevel.INFO, "λ")
        assert stream.getvalue() == "λ\n".encode()

    def test_bytes_written_unchanged(self) -> None:
        """write_bytes adds nothing."""
        stream = io.BytesIO()
        OutputChannel(OutputStream(stream)).write_bytes(ReportLevel.INFO, b"\x00raw")
        assert stream.getvalue() == b"\x00raw"

    def test_event_bytes_written_unchanged(self) -> None:
        """write_event writes encoder framing as-is."""
        stream = io.BytesIO()
        OutputChannel(OutputStream(stream)).write_event(ReportLevel.INFO, b'{"a":1}\n')
        assert stream.getvalue() == b'{"a":1}\n'

    def test_stream_mode_keeps_counter(self) -> None:
        """Counter only moves in split mode."""
        channel = OutputChannel(OutputStream(io.BytesIO()))
        channel.write_text(ReportLevel.INFO, "x")
        assert channel.next_index == 0

    def test_close_when_done(self) -> None:
        """close() closes an owned stream."""
        stream = io.BytesIO()
        OutputChannel(OutputStream(stream, close_when_done=True)).close()
        assert stream.closed

    def test_close_keeps_shared_stream_open(self) -> None:
        """close() leaves a borrowed stream open."""
        stream = io.BytesIO()
        OutputChannel(OutputStream(stream)).close()
        assert not stream.closed


class TestSplitMode:
    """Tests for split-file routing."""

    def test_one_file_per_write(self, tmp_path: Path) -> None:
        """Each write creates <prefix><index>."""
        prefix = str(tmp_path / "report-")
        channel = OutputChannel(OutputSplit(prefix))
        channel.write_text(ReportLevel.INFO, "first")
        channel.write_bytes(ReportLevel.DEBUG, b"second")
        channel.write_event(ReportLevel.INFO, b"{}\n")

        assert (tmp_path / "report-0").read_bytes() == b"first\n"
        assert (tmp_path / "report-1").read_bytes() == b"second"
        assert (tmp_path / "report-2").read_bytes() == b"{}\n"
        assert channel.next_index == 3

    def test_file_closed_when_render_raises(self, tmp_path: Path) -> None:
        """Handle is released even if render fails; error propagates."""
        handles: list[BinaryIO] = []

        def render(handle: BinaryIO) -> None:
            handles.append(handle)
            handle.write(b"partial")
            raise RuntimeError("render failed")

        channel = OutputChannel(OutputSplit(str(tmp_path / "r")))
        with pytest.raises(RuntimeError, match="render failed"):
            channel.write(ReportLevel.INFO, render)

        assert handles[0].closed
        assert (tmp_path / "r0").read_bytes() == b"partial"

    def test_open_failure_raises_report_write_error(self, tmp_path: Path) -> None:
        """Missing directory is fatal, not skipped."""
        prefix = str(tmp_path / "missing" / "r")
        channel = OutputChannel(OutputSplit(prefix))
        with pytest.raises(ReportWriteError) as exc_info:
            channel.write_text(ReportLevel.INFO, "lost")
        assert exc_info.value.path == f"{prefix}0"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_failed_write_is_not_retried(self, tmp_path: Path) -> None:
        """A failed write consumes its index; the next write gets a new one."""
        channel = OutputChannel(OutputSplit(str(tmp_path / "missing" / "r")))
        with pytest.raises(ReportWriteError):
            channel.write_text(ReportLevel.INFO, "lost")
        assert channel.next_index == 1
