"""Structured-object encoder port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from runreport.domain.events import Event


class EventEncoderProtocol(Protocol):
    """Contract for machine event encoders.

    Output must be self-delimiting: one call, one framed object.
    """

    def encode(self, event: Event) -> bytes:
        """Serialize event.

        Args:
            event: One of the four machine event shapes.

        Returns:
            Encoded bytes including framing.
        """
        ...
