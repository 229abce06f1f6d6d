"""Flattened view of one test."""

from __future__ import annotations

from dataclasses import dataclass

from runreport.domain.exceptions import EmptyTestPathError
from runreport.domain.model.location import Location
from runreport.domain.model.result import ResultPayload


def flat_name(path: tuple[str, ...]) -> str:
    """Join hierarchical path segments with dots."""
    return ".".join(path)


@dataclass(frozen=True, slots=True)
class FlatTest:
    """Test identity independent of any hierarchical grouping.

    Attributes:
        path: Hierarchical name segments, e.g. ("Suite", "testFoo")
        location: Source location, None if unknown
        payload: Result payload. None at discovery and start time.
    """

    path: tuple[str, ...]
    location: Location | None = None
    payload: ResultPayload | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise EmptyTestPathError

    @property
    def flat_name(self) -> str:
        """Dot-joined path."""
        return flat_name(self.path)
