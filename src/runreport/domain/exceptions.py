"""Domain exceptions: all public errors of runreport.

All exceptions visible to users are defined in the domain.
Application/Infrastructure raise these, not their own public exceptions.
"""


class RunReportError(Exception):
    """Base for all runreport error exceptions.

    Allows: except RunReportError to catch all library errors.
    """


class InvalidLocationError(RunReportError, ValueError):
    """Location line must be > 0.

    Attributes:
        line: Invalid line number.
    """

    def __init__(self, line: int) -> None:
        """Initialize with invalid line."""
        self.line = line
        super().__init__(f"line must be > 0, got {line}")


class EmptyTestPathError(RunReportError, ValueError):
    """Test path must have at least one segment."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("test path must not be empty")


class NegativeDurationError(RunReportError, ValueError):
    """Elapsed time must be >= 0.

    Attributes:
        value: Invalid duration in milliseconds.
    """

    def __init__(self, value: int) -> None:
        """Initialize with invalid duration."""
        self.value = value
        super().__init__(f"duration must be >= 0 ms, got {value}")


class NegativeCountError(RunReportError, ValueError):
    """Outcome count must be >= 0.

    Attributes:
        name: Name of the count.
        value: Invalid count.
    """

    def __init__(self, name: str, value: int) -> None:
        """Initialize with count name and invalid value."""
        self.name = name
        self.value = value
        super().__init__(f"{name} must be >= 0, got {value}")


class EmptySplitPrefixError(RunReportError, ValueError):
    """Split output needs a non-empty path prefix."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("split output prefix must not be empty")


class ReportWriteError(RunReportError, OSError):
    """Writing a report file failed.

    Fatal for the run: a missing report is worse than a crashed run.
    Preserves the original OSError via __cause__.

    Attributes:
        path: File that could not be written.
        original: Original OSError.
    """

    def __init__(self, path: str, original: OSError) -> None:
        """Initialize with target path and original error."""
        self.path = path
        self.original = original
        super().__init__(f"cannot write report file {path}: {original}")
        self.__cause__ = original
