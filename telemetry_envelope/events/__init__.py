from telemetry_envelope.events.types import (
    ALLOWED_ACTIONS,
    AnyEventTypeAction,
    AuditEventAction,
    AuditEventTypeAction,
    ErrorEventAction,
    ErrorEventTypeAction,
    EventAction,
    EventType,
    EventTypeAction,
    LogEventAction,
    LogEventTypeAction,
    NullEventAction,
    TraceEventAction,
    TraceEventTypeAction,
    is_allowed_action,
    type_action_for,
)
from telemetry_envelope.events.metadata import EventMetadata, EventStateMetadata, EventStatusType
from telemetry_envelope.events.message import EventMessage, MessageMetadata
from telemetry_envelope.events.response import LogResponse, LogResponseStatus

__all__ = [
    "ALLOWED_ACTIONS",
    "AnyEventTypeAction",
    "AuditEventAction",
    "AuditEventTypeAction",
    "ErrorEventAction",
    "ErrorEventTypeAction",
    "EventAction",
    "EventMessage",
    "EventMetadata",
    "EventStateMetadata",
    "EventStatusType",
    "EventType",
    "EventTypeAction",
    "LogEventAction",
    "LogEventTypeAction",
    "LogResponse",
    "LogResponseStatus",
    "MessageMetadata",
    "NullEventAction",
    "TraceEventAction",
    "TraceEventTypeAction",
    "is_allowed_action",
    "type_action_for",
]
