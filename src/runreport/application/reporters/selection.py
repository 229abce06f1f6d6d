"""Reporter selection: (parallel, machine_output) → one binding.

Exactly four combinations exist, each mapped to one binding.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from runreport.application.reporters.human import HUMAN_PARALLEL, HUMAN_SEQUENTIAL
from runreport.application.reporters.machine import MACHINE_PARALLEL, MACHINE_SEQUENTIAL

if TYPE_CHECKING:
    from collections.abc import Mapping

    from runreport.application.reporters._base import ReporterBinding

logger = logging.getLogger(__name__)

# (parallel, machine_output) → binding
_BINDINGS: Mapping[tuple[bool, bool], ReporterBinding] = MappingProxyType(
    {
        (False, False): HUMAN_SEQUENTIAL,
        (True, False): HUMAN_PARALLEL,
        (False, True): MACHINE_SEQUENTIAL,
        (True, True): MACHINE_PARALLEL,
    },
)


def select_reporter(*, parallel: bool, machine_output: bool) -> ReporterBinding:
    """Pick the binding for one run configuration.

    Args:
        parallel: Tests run in parallel.
        machine_output: Produce machine-readable output.

    Returns:
        The single matching binding.
    """
    binding = _BINDINGS[(bool(parallel), bool(machine_output))]
    logger.debug(
        "selected reporter %s (parallel=%s, machine_output=%s)",
        binding.reporter_id,
        parallel,
        machine_output,
    )
    return binding


def default_reporters(
    parallel: bool,  # noqa: FBT001
    machine_output: bool,  # noqa: FBT001
) -> tuple[ReporterBinding, ...]:
    """Default reporter set for a run: exactly one binding.

    Args:
        parallel: Tests run in parallel.
        machine_output: Produce machine-readable output.

    Returns:
        One-element tuple, ready for RunConfig.reporters.
    """
    return (select_reporter(parallel=parallel, machine_output=machine_output),)
