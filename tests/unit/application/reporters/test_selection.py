"""Tests for reporter selection."""

import itertools

import pytest

from runreport.application.reporters import (
    HUMAN_PARALLEL,
    HUMAN_SEQUENTIAL,
    MACHINE_PARALLEL,
    MACHINE_SEQUENTIAL,
    default_reporters,
    select_reporter,
)


class TestSelectReporter:
    """Tests for select_reporter() and default_reporters()."""

    @pytest.mark.parametrize(
        ("parallel", "machine_output", "reporter_id"),
        [
            (False, False, "human-sequential"),
            (True, False, "human-parallel"),
            (False, True, "machine-sequential"),
            (True, True, "machine-parallel"),
        ],
    )
    def test_table(self, *, parallel: bool, machine_output: bool, reporter_id: str) -> None:
        """Each combination maps to its binding."""
        binding = select_reporter(parallel=parallel, machine_output=machine_output)
        assert binding.reporter_id == reporter_id

    def test_exactly_one_binding_each(self) -> None:
        """default_reporters returns one binding; four combinations, four bindings."""
        seen = []
        for parallel, machine_output in itertools.product((False, True), repeat=2):
            reporters = default_reporters(parallel, machine_output)
            assert len(reporters) == 1
            seen.append(reporters[0])
        assert seen == [HUMAN_SEQUENTIAL, MACHINE_SEQUENTIAL, HUMAN_PARALLEL, MACHINE_PARALLEL]
        assert len({b.reporter_id for b in seen}) == 4

    def test_truthy_values_normalized(self) -> None:
        """Truthy non-bool knobs select the same bindings."""
        assert select_reporter(parallel=1, machine_output=0) is HUMAN_PARALLEL  # type: ignore[arg-type]
