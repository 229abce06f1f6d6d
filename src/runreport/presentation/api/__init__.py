"""Public API."""

from runreport.presentation.api.reporting import create_dispatcher, reporting

__all__ = ["create_dispatcher", "reporting"]
