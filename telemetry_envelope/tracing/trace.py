"""Span context attached to every event message."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from telemetry_envelope.timestamps import IsoTimestamp, OptionalIsoTimestamp, now_timestamp
from telemetry_envelope.tracing.ids import (
    is_valid_span_id,
    is_valid_trace_id,
    new_span_id,
    new_trace_id,
)
from telemetry_envelope.tracing.random_source import RandomSource


class EventTraceMetadata(BaseModel):
    """One span: owning service, trace/span ids, and start/finish times.

    Ids are checked on construction and on assignment; a bad id raises
    ``pydantic.ValidationError`` and no instance is produced.
    ``finish()`` may be called more than once, the last call wins.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    service: str = Field(min_length=1)
    trace_id: str
    span_id: str
    parent_span_id: str | None = None
    sampled: int | float | None = None
    flags: int | None = None
    start_timestamp: IsoTimestamp = Field(default_factory=now_timestamp)
    finish_timestamp: OptionalIsoTimestamp = None

    @field_validator("trace_id")
    @classmethod
    def _check_trace_id(cls, value: str) -> str:
        if not is_valid_trace_id(value):
            raise ValueError(f"Invalid traceId: {value}")
        return value

    @field_validator("span_id")
    @classmethod
    def _check_span_id(cls, value: str) -> str:
        if not is_valid_span_id(value):
            raise ValueError(f"Invalid spanId: {value}")
        return value

    @field_validator("parent_span_id")
    @classmethod
    def _check_parent_span_id(cls, value: str | None) -> str | None:
        if value is not None and not is_valid_span_id(value):
            raise ValueError(f"Invalid parentSpanId: {value}")
        return value

    @field_validator("start_timestamp", mode="before")
    @classmethod
    def _default_start(cls, value: object) -> object:
        return now_timestamp() if value is None else value

    # -- lifecycle ----------------------------------------------------------

    @classmethod
    def start(
        cls,
        service: str,
        *,
        trace_id: str | None = None,
        parent_span_id: str | None = None,
        sampled: int | float | None = None,
        flags: int | None = None,
        source: RandomSource | None = None,
    ) -> EventTraceMetadata:
        """Open a span with a fresh span id (and a fresh trace id unless given)."""
        return cls(
            service=service,
            trace_id=new_trace_id(source) if trace_id is None else trace_id,
            span_id=new_span_id(source),
            parent_span_id=parent_span_id,
            sampled=sampled,
            flags=flags,
        )

    def child(
        self,
        service: str | None = None,
        *,
        sampled: int | float | None = None,
        flags: int | None = None,
        source: RandomSource | None = None,
    ) -> EventTraceMetadata:
        """Open a span nested under this one in the same trace."""
        return type(self).start(
            service or self.service,
            trace_id=self.trace_id,
            parent_span_id=self.span_id,
            sampled=self.sampled if sampled is None else sampled,
            flags=self.flags if flags is None else flags,
            source=source,
        )

    def finish(self, finish_timestamp: str | datetime | None = None) -> None:
        self.finish_timestamp = finish_timestamp or now_timestamp()

    @property
    def is_finished(self) -> bool:
        return self.finish_timestamp is not None
