"""Application services."""

from runreport.application.services.dispatcher import Dispatcher

__all__ = ["Dispatcher"]
