"""JSON encoder: machine event → newline-delimited JSON bytes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from runreport.domain.events import (
    TestEndEvent,
    TestListEvent,
    TestResultsEvent,
    TestStartEvent,
    get_event_type,
)

if TYPE_CHECKING:
    from runreport.domain.events import Event
    from runreport.domain.model.flat_test import FlatTest
    from runreport.domain.model.location import Location
    from runreport.domain.model.result import CallFrame


class JsonEventEncoder:
    """One compact JSON object per event, terminated by a newline.

    Compact separators keep every object on one line, so consumers can
    split the stream on newlines.
    """

    def __init__(self, *, ensure_ascii: bool = False) -> None:
        """Initialize encoder.

        Args:
            ensure_ascii: Escape non-ASCII characters.
        """
        self._ensure_ascii = ensure_ascii

    def encode(self, event: Event) -> bytes:
        """Serialize event as one JSON line.

        Args:
            event: Machine event to encode.

        Returns:
            UTF-8 JSON followed by b"\\n".
        """
        text = json.dumps(
            event_to_dict(event),
            separators=(",", ":"),
            ensure_ascii=self._ensure_ascii,
        )
        return text.encode("utf-8") + b"\n"


def _location_to_dict(loc: Location | None) -> dict[str, object] | None:
    """Convert Location to dict."""
    if loc is None:
        return None
    return {
        "file": loc.file,
        "line": loc.line,
    }


def _test_to_dict(test: FlatTest) -> dict[str, object]:
    """Convert FlatTest identity to dict. Payload is rendered separately."""
    return {
        "flat_name": test.flat_name,
        "path": list(test.path),
        "location": _location_to_dict(test.location),
    }


def _call_frame_to_dict(frame: CallFrame) -> dict[str, object]:
    """Convert CallFrame to dict."""
    return {
        "message": frame.message,
        "location": _location_to_dict(frame.location),
    }


def _event_body(event: Event) -> dict[str, object]:
    """Convert event fields to dict. Type tag added by event_to_dict()."""
    match event:
        case TestStartEvent():
            return {
                "test": _test_to_dict(event.test),
                "test_name": event.flat_name,
            }
        case TestEndEvent():
            payload = event.payload
            return {
                "test": _test_to_dict(event.test),
                "test_name": event.flat_name,
                "result": payload.outcome.value,
                "message": payload.message,
                "callers": [_call_frame_to_dict(f) for f in payload.callers],
                "wall_time_ms": payload.wall_time_ms,
            }
        case TestListEvent():
            return {
                "tests": [{"test": _test_to_dict(t), "test_name": name} for t, name in event.tests],
            }
        case TestResultsEvent():
            return {
                "wall_time_ms": event.totals.total_time_ms,
                "passed": event.totals.passed,
                "pending": event.totals.pending,
                "failures": event.totals.failed,
                "errors": event.totals.errored,
            }


def event_to_dict(event: Event) -> dict[str, object]:
    """Convert Event to JSON-serializable dict, "type" first."""
    return {"type": get_event_type(event).value, **_event_body(event)}
