"""Ports for external services consumed by reporters."""

from runreport.domain.ports.colorizer import ColorizerProtocol
from runreport.domain.ports.encoder import EventEncoderProtocol

__all__ = [
    "ColorizerProtocol",
    "EventEncoderProtocol",
]
