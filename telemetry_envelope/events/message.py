"""Outer envelope: opaque content plus routing and telemetry metadata."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from telemetry_envelope.events.metadata import EventMetadata
from telemetry_envelope.tracing.ids import new_event_id
from telemetry_envelope.tracing.trace import EventTraceMetadata

ContentT = TypeVar("ContentT")


def _own_copy(value: Any) -> Any:
    # Attached models are copied so the caller's instance stays unshared.
    return value.model_copy(deep=True) if isinstance(value, BaseModel) else value


class MessageMetadata(BaseModel):
    event: EventMetadata
    trace: EventTraceMetadata

    @field_validator("event", "trace", mode="before")
    @classmethod
    def _copy_attached(cls, value: Any) -> Any:
        return _own_copy(value)


class EventMessage(BaseModel, Generic[ContentT]):
    """Envelope handed to transport/persistence as a plain record.

    Built from ``id``/``type``/``content``; ``metadata`` and the routing
    fields are usually attached afterwards::

        msg = EventMessage(type="application/json", content={"ok": True})
        msg.metadata = MessageMetadata(event=event, trace=trace)
        msg.from_ = "dfsp1"

    Attached metadata is copied, so later changes go through
    ``msg.metadata`` (e.g. ``msg.metadata.trace.finish()``).

    ``from`` is a keyword, so the attribute is ``from_`` and the structured
    form (``model_dump(by_alias=True)``) uses ``from``.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=new_event_id)
    type: str
    content: ContentT
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    pp: str | None = None
    metadata: MessageMetadata | None = None

    @field_validator("metadata", mode="before")
    @classmethod
    def _copy_metadata(cls, value: Any) -> Any:
        return _own_copy(value)
