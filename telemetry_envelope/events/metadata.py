"""Event metadata: identity, category/action, outcome and reply link."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from telemetry_envelope.events.types import (
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
from telemetry_envelope.timestamps import IsoTimestamp, now_timestamp
from telemetry_envelope.tracing.ids import new_event_id


class EventStatusType(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


class EventStateMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: EventStatusType
    code: int | None = None
    description: str | None = None

    @classmethod
    def success(cls, code: int | None = None, description: str | None = None) -> EventStateMetadata:
        return cls(status=EventStatusType.SUCCESS, code=code, description=description)

    @classmethod
    def failed(cls, code: int | None = None, description: str | None = None) -> EventStateMetadata:
        return cls(status=EventStatusType.FAILED, code=code, description=description)


class EventMetadata(BaseModel):
    """Describes what happened: category/action, when, and how it went.

    Prefer the factories (``log``, ``audit``, ``error``, ``trace``,
    ``create``) over the raw constructor: they go through the matching
    ``*EventTypeAction`` variant so an illegal action fails up front.
    Raw construction and ``model_validate`` still check the pair.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=new_event_id)
    type: EventType = EventType.UNDEFINED
    action: EventAction = NullEventAction.UNDEFINED
    created_at: IsoTimestamp = Field(default_factory=now_timestamp)
    state: EventStateMetadata
    response_to: str | None = None

    @model_validator(mode="after")
    def _check_type_action(self) -> EventMetadata:
        if not is_allowed_action(self.type, self.action):
            raise ValueError(
                f"Action '{self.action.value}' is not allowed for event type '{self.type.value}'"
            )
        return self

    @property
    def type_action(self) -> AnyEventTypeAction:
        return type_action_for(self.type, self.action)

    # -- factories ----------------------------------------------------------

    @classmethod
    def create(
        cls,
        id: str | None,
        type_action: EventTypeAction,
        created_at: str | datetime,
        state: EventStateMetadata,
        response_to: str | None = None,
    ) -> EventMetadata:
        return cls(
            id=new_event_id() if id is None else id,
            type=type_action.get_type(),
            action=type_action.action,
            created_at=created_at,
            state=state,
            response_to=response_to,
        )

    @classmethod
    def log(
        cls,
        id: str | None,
        action: LogEventAction | NullEventAction | str,
        created_at: str | datetime,
        state: EventStateMetadata,
        response_to: str | None = None,
    ) -> EventMetadata:
        return cls.create(id, LogEventTypeAction(action), created_at, state, response_to)

    @classmethod
    def audit(
        cls,
        id: str | None,
        action: AuditEventAction | NullEventAction | str,
        created_at: str | datetime,
        state: EventStateMetadata,
        response_to: str | None = None,
    ) -> EventMetadata:
        return cls.create(id, AuditEventTypeAction(action), created_at, state, response_to)

    @classmethod
    def error(
        cls,
        id: str | None,
        action: ErrorEventAction | NullEventAction | str,
        created_at: str | datetime,
        state: EventStateMetadata,
        response_to: str | None = None,
    ) -> EventMetadata:
        return cls.create(id, ErrorEventTypeAction(action), created_at, state, response_to)

    @classmethod
    def trace(
        cls,
        id: str | None,
        action: TraceEventAction | NullEventAction | str,
        created_at: str | datetime,
        state: EventStateMetadata,
        response_to: str | None = None,
    ) -> EventMetadata:
        return cls.create(id, TraceEventTypeAction(action), created_at, state, response_to)
