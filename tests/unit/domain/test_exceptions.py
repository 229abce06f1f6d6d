"""Tests for domain exceptions."""

import pytest

from runreport.domain.exceptions import (
    EmptySplitPrefixError,
    EmptyTestPathError,
    InvalidLocationError,
    NegativeCountError,
    NegativeDurationError,
    ReportWriteError,
    RunReportError,
)


class TestHierarchy:
    """All errors inherit RunReportError and the matching builtin."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (InvalidLocationError(0), ValueError),
            (EmptyTestPathError(), ValueError),
            (NegativeDurationError(-1), ValueError),
            (NegativeCountError("passed", -1), ValueError),
            (EmptySplitPrefixError(), ValueError),
            (ReportWriteError("out0", OSError("disk full")), OSError),
        ],
    )
    def test_inherits(self, error: Exception, builtin: type[Exception]) -> None:
        """Error is catchable as RunReportError and as builtin."""
        assert isinstance(error, RunReportError)
        assert isinstance(error, builtin)


class TestReportWriteError:
    """Tests for ReportWriteError."""

    def test_keeps_path_and_cause(self) -> None:
        """Original OSError is preserved as __cause__."""
        original = PermissionError("denied")
        error = ReportWriteError("out/report-3", original)
        assert error.path == "out/report-3"
        assert error.original is original
        assert error.__cause__ is original
        assert "out/report-3" in str(error)
        assert "denied" in str(error)
