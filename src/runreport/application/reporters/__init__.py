"""Reporters for test lifecycle events.

Four built-in bindings: human/machine × sequential/parallel.
Users can register their own reporters implementing ReporterProtocol.
"""

from runreport.application.reporters._base import ReportContext, ReporterBinding
from runreport.application.reporters.human import HUMAN_PARALLEL, HUMAN_SEQUENTIAL
from runreport.application.reporters.machine import MACHINE_PARALLEL, MACHINE_SEQUENTIAL
from runreport.application.reporters.protocol import ReporterProtocol
from runreport.application.reporters.selection import default_reporters, select_reporter

__all__ = [
    "HUMAN_PARALLEL",
    "HUMAN_SEQUENTIAL",
    "MACHINE_PARALLEL",
    "MACHINE_SEQUENTIAL",
    "ReportContext",
    "ReporterBinding",
    "ReporterProtocol",
    "default_reporters",
    "select_reporter",
]
