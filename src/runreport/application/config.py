"""Run configuration: read-only inputs of one reporting run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from runreport.infrastructure.colors import PlainColorizer
from runreport.infrastructure.json_encoder import JsonEventEncoder

if TYPE_CHECKING:
    from runreport.application.reporters.protocol import ReporterProtocol
    from runreport.domain.model.output import OutputDestination
    from runreport.domain.ports.colorizer import ColorizerProtocol
    from runreport.domain.ports.encoder import EventEncoderProtocol


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Configuration created once at run start.

    Immutable (frozen dataclass). The only mutable state of a run is the
    split-mode file index, owned by the OutputChannel.

    Attributes:
        reporters: Active reporters, called in this order.
        output: Shared stream or split-file prefix.
        quiet: Drop DEBUG messages.
        colors: Color service for human output.
        encoder: Encoder for machine events.
    """

    reporters: tuple[ReporterProtocol, ...]
    output: OutputDestination
    quiet: bool = False
    colors: ColorizerProtocol = field(default_factory=PlainColorizer)
    encoder: EventEncoderProtocol = field(default_factory=JsonEventEncoder)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.reporters, tuple):
            raise TypeError(f"reporters must be tuple, got {type(self.reporters).__name__}")
