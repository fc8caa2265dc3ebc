"""Observers for resolution and traversal decisions.

Tracers are purely observational: components report what they did, and
nothing in the analysis core reads a tracer back.
"""

import logging
from typing import Any

logger = logging.getLogger("deepcontext.trace")


class Tracer:
    """No-op tracer used when debugging is off."""

    enabled = False

    def emit(self, event: str, **fields: Any) -> None:
        pass


class LoggingTracer(Tracer):
    """Writes each event as a debug record on the ``deepcontext.trace`` logger."""

    enabled = True

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def emit(self, event: str, **fields: Any) -> None:
        details = " ".join(f"{key}={value!r}" for key, value in fields.items())
        self.log.debug("%s %s", event, details)


class CollectingTracer(Tracer):
    """Keeps events in memory, in emission order."""

    enabled = True

    def __init__(self):
        self.events: list[tuple[str, dict[str, Any]]] = []

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def names(self) -> list[str]:
        return [event for event, _ in self.events]

    def as_dicts(self) -> list[dict[str, Any]]:
        return [{"event": event, **fields} for event, fields in self.events]


NULL_TRACER = Tracer()


def make_tracer(debug: bool) -> Tracer:
    return LoggingTracer() if debug else NULL_TRACER
