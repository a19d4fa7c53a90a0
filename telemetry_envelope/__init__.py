"""telemetry_envelope — validated event envelope with trace/span metadata.

Usage::

    from telemetry_envelope import (
        EventMessage, EventMetadata, EventStateMetadata, MessageMetadata,
        create_trace,
    )

    trace = create_trace(service="ledger")
    event = EventMetadata.log(None, "info", datetime.now(), EventStateMetadata.success())
    msg = EventMessage(type="application/json", content={"balance": 10})
    msg.metadata = MessageMetadata(event=event, trace=trace)
    msg.metadata.trace.finish()  # the envelope holds its own copy
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

load_dotenv()  # reads .env into os.environ (no-op if file missing)

from telemetry_envelope import config
from telemetry_envelope.tracing import (
    EventTraceMetadata,
    RandomSource,
    SecureRandomSource,
    SeededRandomSource,
    get_random_source,
    is_valid_span_id,
    is_valid_trace_id,
    new_event_id,
    new_span_id,
    new_trace_id,
    set_random_source,
)
from telemetry_envelope.events import (
    AuditEventAction,
    AuditEventTypeAction,
    ErrorEventAction,
    ErrorEventTypeAction,
    EventMessage,
    EventMetadata,
    EventStateMetadata,
    EventStatusType,
    EventType,
    EventTypeAction,
    LogEventAction,
    LogEventTypeAction,
    LogResponse,
    LogResponseStatus,
    MessageMetadata,
    NullEventAction,
    TraceEventAction,
    TraceEventTypeAction,
    type_action_for,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AuditEventAction",
    "AuditEventTypeAction",
    "ErrorEventAction",
    "ErrorEventTypeAction",
    "EventMessage",
    "EventMetadata",
    "EventStateMetadata",
    "EventStatusType",
    "EventTraceMetadata",
    "EventType",
    "EventTypeAction",
    "LogEventAction",
    "LogEventTypeAction",
    "LogResponse",
    "LogResponseStatus",
    "MessageMetadata",
    "NullEventAction",
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
    "TraceEventAction",
    "TraceEventTypeAction",
    "create_trace",
    "get_random_source",
    "is_valid_span_id",
    "is_valid_trace_id",
    "new_event_id",
    "new_span_id",
    "new_trace_id",
    "set_random_source",
    "type_action_for",
]


def create_trace(
    *,
    service: str | None = None,
    parent: EventTraceMetadata | None = None,
    sampled: int | float | None = None,
    flags: int | None = None,
) -> EventTraceMetadata:
    """Open a span using the configured defaults.

    With *parent* the new span joins its trace and inherits its service,
    ``sampled`` and ``flags`` unless given here. Without it a new trace is
    started for *service* (default ``TELEMETRY_SERVICE_NAME``) with
    ``sampled`` defaulting to ``TELEMETRY_SAMPLED``.
    """
    if parent is not None:
        trace = parent.child(service, sampled=sampled, flags=flags)
    else:
        trace = EventTraceMetadata.start(
            service or config.service_name(),
            sampled=config.default_sampled() if sampled is None else sampled,
            flags=flags,
        )
    logger.debug(
        "Started span %s in trace %s for %s (parent=%s)",
        trace.span_id, trace.trace_id, trace.service, trace.parent_span_id,
    )
    return trace
