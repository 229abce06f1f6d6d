"""runreport - result reporting for test runs: dispatch, formatting, output routing."""

__version__ = "0.1.0"

from runreport.application.config import RunConfig
from runreport.application.reporters import ReporterBinding, ReporterProtocol, default_reporters
from runreport.application.services.dispatcher import Dispatcher
from runreport.domain.model import (
    CallFrame,
    FlatTest,
    Location,
    Outcome,
    OutputSplit,
    OutputStream,
    ReportLevel,
    ResultPayload,
    RunTotals,
)
from runreport.presentation.api import create_dispatcher, reporting

__all__ = [
    "CallFrame",
    "Dispatcher",
    "FlatTest",
    "Location",
    "Outcome",
    "OutputSplit",
    "OutputStream",
    "ReportLevel",
    "ReporterBinding",
    "ReporterProtocol",
    "ResultPayload",
    "RunConfig",
    "RunTotals",
    "__version__",
    "create_dispatcher",
    "default_reporters",
    "reporting",
]
