from telemetry_envelope.tracing.random_source import (
    RandomSource,
    SecureRandomSource,
    SeededRandomSource,
    get_random_source,
    set_random_source,
)
from telemetry_envelope.tracing.ids import (
    is_valid_span_id,
    is_valid_trace_id,
    new_event_id,
    new_span_id,
    new_trace_id,
)
from telemetry_envelope.tracing.trace import EventTraceMetadata

__all__ = [
    "EventTraceMetadata",
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
    "get_random_source",
    "is_valid_span_id",
    "is_valid_trace_id",
    "new_event_id",
    "new_span_id",
    "new_trace_id",
    "set_random_source",
]
