"""Reporter callback type aliases.

PEP 695 type aliases (lazily evaluated).
Every callback takes the ReportContext first and returns nothing.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from runreport.application.reporters._base import ReportContext
    from runreport.domain.model.flat_test import FlatTest

type ReportAllTests = Callable[[ReportContext, Sequence[FlatTest]], None]
type ReportGlobalStart = Callable[[ReportContext, Sequence[FlatTest]], None]
type ReportTestStart = Callable[[ReportContext, FlatTest], None]
type ReportTestResult = Callable[[ReportContext, FlatTest], None]
type ReportGlobalResults = Callable[
    [
        ReportContext,
        int,
        Sequence[FlatTest],
        Sequence[FlatTest],
        Sequence[FlatTest],
        Sequence[FlatTest],
    ],
    None,
]
