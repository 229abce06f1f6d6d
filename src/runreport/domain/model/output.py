"""Output destinations for reported bytes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from runreport.domain.exceptions import EmptySplitPrefixError


@dataclass(frozen=True, slots=True)
class OutputStream:
    """Shared stream destination.

    Attributes:
        stream: Binary stream every report is written to
        close_when_done: Close the stream when the channel is closed
    """

    stream: BinaryIO
    close_when_done: bool = False


@dataclass(frozen=True, slots=True)
class OutputSplit:
    """Split destination: one new file per physical write.

    Files are named <prefix><index>, index starting at 0.

    Attributes:
        prefix: Path prefix the index is appended to
    """

    prefix: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.prefix:
            raise EmptySplitPrefixError


OutputDestination = OutputStream | OutputSplit
