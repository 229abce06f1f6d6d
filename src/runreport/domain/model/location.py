"""Source code location value object."""

from dataclasses import dataclass

from runreport.domain.exceptions import InvalidLocationError


@dataclass(frozen=True, slots=True)
class Location:
    """Position of a test or call site in source code.

    Attributes:
        file: Path to source file, as reported by the engine
        line: Line number (1-based, must be > 0)
    """

    file: str
    line: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise InvalidLocationError(self.line)

    def __str__(self) -> str:
        """Format as file:line."""
        return f"{self.file}:{self.line}"
