"""Event categories and the actions each one admits.

Every ``EventType`` owns a closed set of actions. The pairing is carried by
one ``*EventTypeAction`` model per category whose ``action`` field only
accepts that category's enum (or ``NullEventAction.UNDEFINED``), so an
illegal pair never gets past construction::

    LogEventTypeAction(LogEventAction.DEBUG)      # ok
    AuditEventTypeAction("debug")                 # ValidationError
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class EventType(str, Enum):
    UNDEFINED = "undefined"
    LOG = "log"
    AUDIT = "audit"
    ERROR = "error"
    TRACE = "trace"


class LogEventAction(str, Enum):
    INFO = "info"
    DEBUG = "debug"
    VERBOSE = "verbose"
    PERF = "perf"


class AuditEventAction(str, Enum):
    DEFAULT = "default"


class ErrorEventAction(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


class TraceEventAction(str, Enum):
    SPAN = "span"


class NullEventAction(str, Enum):
    """Fallback action accepted by every category."""
    UNDEFINED = "undefined"


EventAction = Union[
    LogEventAction,
    AuditEventAction,
    ErrorEventAction,
    TraceEventAction,
    NullEventAction,
]


# ---------------------------------------------------------------------------
# Type/action variants
# ---------------------------------------------------------------------------

class _EventTypeActionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __init__(self, action: Any = NullEventAction.UNDEFINED, **data: Any) -> None:
        super().__init__(action=action, **data)

    def get_type(self) -> EventType:
        return EventType(self.type)  # type: ignore[attr-defined]


class LogEventTypeAction(_EventTypeActionBase):
    type: Literal["log"] = "log"
    action: LogEventAction | NullEventAction = NullEventAction.UNDEFINED


class AuditEventTypeAction(_EventTypeActionBase):
    type: Literal["audit"] = "audit"
    action: AuditEventAction | NullEventAction = NullEventAction.UNDEFINED


class ErrorEventTypeAction(_EventTypeActionBase):
    type: Literal["error"] = "error"
    action: ErrorEventAction | NullEventAction = NullEventAction.UNDEFINED


class TraceEventTypeAction(_EventTypeActionBase):
    type: Literal["trace"] = "trace"
    action: TraceEventAction | NullEventAction = NullEventAction.UNDEFINED


class UndefinedEventTypeAction(_EventTypeActionBase):
    """Only reached when parsing data whose category is ``undefined``."""
    type: Literal["undefined"] = "undefined"
    action: NullEventAction = NullEventAction.UNDEFINED


AnyEventTypeAction = Union[
    LogEventTypeAction,
    AuditEventTypeAction,
    ErrorEventTypeAction,
    TraceEventTypeAction,
    UndefinedEventTypeAction,
]

EventTypeAction = Annotated[AnyEventTypeAction, Field(discriminator="type")]

_type_action_adapter: TypeAdapter[AnyEventTypeAction] = TypeAdapter(EventTypeAction)


# ---------------------------------------------------------------------------
# Compatibility table
# ---------------------------------------------------------------------------

def _values(*enums: type[Enum]) -> frozenset[str]:
    return frozenset(member.value for enum in enums for member in enum)


ALLOWED_ACTIONS: dict[EventType, frozenset[str]] = {
    EventType.UNDEFINED: _values(NullEventAction),
    EventType.LOG: _values(LogEventAction, NullEventAction),
    EventType.AUDIT: _values(AuditEventAction, NullEventAction),
    EventType.ERROR: _values(ErrorEventAction, NullEventAction),
    EventType.TRACE: _values(TraceEventAction, NullEventAction),
}


def _raw(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def is_allowed_action(event_type: EventType | str, action: EventAction | str) -> bool:
    event_type, action = _raw(event_type), _raw(action)
    if not isinstance(event_type, str) or not isinstance(action, str):
        return False
    try:
        allowed = ALLOWED_ACTIONS[EventType(event_type)]
    except ValueError:
        return False
    return action in allowed


def type_action_for(event_type: EventType | str, action: EventAction | str) -> AnyEventTypeAction:
    """Build the variant for a (type, action) pair known only at runtime.

    Raises ``pydantic.ValidationError`` for an unknown category or an action
    outside the category's set.
    """
    return _type_action_adapter.validate_python(
        {"type": _raw(event_type), "action": _raw(action)}
    )
