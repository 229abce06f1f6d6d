"""Output channel: level filter + routing of reported bytes.

Two destinations:
  OutputStream: every write goes to one shared binary stream.
  OutputSplit:  every write goes to its own new file <prefix><index>.

Split mode exists for parallel runs: writers never share a descriptor,
so there is no lock contention on the filesystem. The file index counter
is the only shared mutable state and its increment is serialized.
Shared-stream mode does not lock.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from runreport.domain.exceptions import ReportWriteError
from runreport.domain.model.enums import ReportLevel
from runreport.domain.model.output import OutputSplit, OutputStream

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import BinaryIO

    from runreport.domain.model.output import OutputDestination

logger = logging.getLogger(__name__)


class OutputChannel:
    """Decides whether and where a reported message is written.

    Contracts:
        - Quiet: DEBUG writes are dropped, INFO writes always pass
        - Split: one file per physical write, indices 0..N-1, none skipped
        - Errors: write failures propagate, never retried
    """

    def __init__(self, destination: OutputDestination, *, quiet: bool = False) -> None:
        """Initialize channel.

        Args:
            destination: Shared stream or split-file prefix.
            quiet: Drop messages below INFO.
        """
        self._destination = destination
        self._quiet = quiet
        self._next_index = 0
        self._lock = threading.Lock()

    @property
    def quiet(self) -> bool:
        """True if DEBUG messages are dropped."""
        return self._quiet

    @property
    def next_index(self) -> int:
        """Index the next split-mode file will get."""
        with self._lock:
            return self._next_index

    def is_enabled(self, level: ReportLevel) -> bool:
        """Check if a message at level would be written."""
        return not (self._quiet and level < ReportLevel.INFO)

    def write(self, level: ReportLevel, render: Callable[[BinaryIO], None]) -> None:
        """Route one message.

        Args:
            level: Message verbosity.
            render: Writes the message to the handle it is given.

        Raises:
            ReportWriteError: Split file could not be opened or written.
        """
        if not self.is_enabled(level):
            return

        match self._destination:
            case OutputStream(stream=stream):
                render(stream)
                stream.flush()
            case OutputSplit(prefix=prefix):
                self._write_split(prefix, render)

    def write_text(self, level: ReportLevel, text: str) -> None:
        """Write text as UTF-8 followed by exactly one newline."""
        data = text.encode("utf-8") + b"\n"
        self.write(level, lambda handle: handle.write(data))

    def write_bytes(self, level: ReportLevel, data: bytes) -> None:
        """Write raw bytes unchanged."""
        self.write(level, lambda handle: handle.write(data))

    def write_event(self, level: ReportLevel, encoded: bytes) -> None:
        """Write a pre-encoded structured object. Framing is the encoder's."""
        self.write_bytes(level, encoded)

    def close(self) -> None:
        """Release the shared stream if the destination owns it."""
        match self._destination:
            case OutputStream(stream=stream, close_when_done=True):
                stream.close()
            case _:
                pass

    def _take_index(self) -> int:
        """Atomically read and increment the file index."""
        with self._lock:
            index = self._next_index
            self._next_index += 1
        return index

    def _write_split(self, prefix: str, render: Callable[[BinaryIO], None]) -> None:
        """Write one message to a fresh file. File is closed even if render raises."""
        path = f"{prefix}{self._take_index()}"
        logger.debug("writing report file %s", path)
        try:
            with Path(path).open("wb") as handle:
                render(handle)
        except OSError as exc:
            raise ReportWriteError(path, exc) from exc
