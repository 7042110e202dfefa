"""Runtime services shared by the engine."""

from .telemetry import configure, get_logger, record_event, span

__all__ = ["configure", "get_logger", "record_event", "span"]
