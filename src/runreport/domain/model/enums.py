"""Enumerations shared by the reporting model."""

from enum import Enum, IntEnum


class Outcome(Enum):
    """Outcome of a completed test. Set once by the execution engine."""

    PASS = "pass"
    PENDING = "pending"
    FAIL = "fail"
    ERROR = "error"


class ReportLevel(IntEnum):
    """Verbosity of a reported message.

    Ordered: DEBUG < INFO. DEBUG messages are dropped in quiet mode.
    """

    DEBUG = 10
    INFO = 20


class ColorRole(Enum):
    """Semantic role of a colorized fragment."""

    TEST_START = "test_start"
    TEST_OK = "test_ok"
    WARNING = "warning"
    PENDING = "pending"
