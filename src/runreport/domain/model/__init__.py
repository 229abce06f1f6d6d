"""Domain model: immutable value objects describing a test run."""

from runreport.domain.model.enums import ColorRole, Outcome, ReportLevel
from runreport.domain.model.flat_test import FlatTest, flat_name
from runreport.domain.model.location import Location
from runreport.domain.model.output import OutputDestination, OutputSplit, OutputStream
from runreport.domain.model.result import CallFrame, ResultPayload
from runreport.domain.model.totals import RunTotals

__all__ = [
    "CallFrame",
    "ColorRole",
    "FlatTest",
    "Location",
    "Outcome",
    "OutputDestination",
    "OutputSplit",
    "OutputStream",
    "ReportLevel",
    "ResultPayload",
    "RunTotals",
    "flat_name",
]
