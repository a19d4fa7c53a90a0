"""Tests for EventMessage assembly and structured round-trips."""

from __future__ import annotations

import json
from typing import Any

import pytest
from pydantic import ValidationError

from telemetry_envelope.events.message import EventMessage, MessageMetadata
from telemetry_envelope.events.metadata import EventMetadata
from telemetry_envelope.events.response import LogResponse, LogResponseStatus
from telemetry_envelope.tracing.trace import EventTraceMetadata


@pytest.fixture
def message(ok_state, trace_id, span_id, parent_span_id):
    trace = EventTraceMetadata(
        service="svc-a",
        trace_id=trace_id,
        span_id=span_id,
        parent_span_id=parent_span_id,
        sampled=1,
        flags=0,
        start_timestamp="2024-01-15T10:30:00.000Z",
    )
    trace.finish("2024-01-15T10:30:01.500Z")
    event = EventMetadata.audit("evt-1", "default", "2024-01-15T10:30:00.000Z", ok_state)
    msg = EventMessage(
        id="msg-1",
        type="application/json",
        content={"amount": {"currency": "USD", "value": "10.5"}, "tags": ["a", "b"]},
    )
    msg.metadata = MessageMetadata(event=event, trace=trace)
    msg.from_ = "dfsp1"
    msg.to = "dfsp2"
    msg.pp = "pp-1"
    return msg


class TestAssembly:
    def test_minimal_message(self, seeded_source):
        msg = EventMessage(type="text/plain", content="hello")
        assert msg.id
        assert msg.content == "hello"
        assert msg.metadata is None
        assert (msg.from_, msg.to, msg.pp) == (None, None, None)

    def test_attached_fields(self, message):
        assert message.metadata.event.type == "audit"
        assert message.metadata.trace.service == "svc-a"
        assert message.from_ == "dfsp1"

    def test_metadata_assignment_is_validated(self, message):
        with pytest.raises(ValidationError):
            message.metadata = {"event": "nope"}

    def test_from_alias_accepted_on_input(self):
        msg = EventMessage.model_validate({"type": "t", "content": None, "from": "dfsp1"})
        assert msg.from_ == "dfsp1"

    def test_typed_content(self):
        msg = EventMessage[dict[str, int]](type="counts", content={"a": 1})
        assert msg.content == {"a": 1}
        with pytest.raises(ValidationError):
            EventMessage[dict[str, int]](type="counts", content="not a dict")


class TestRoundTrip:
    def test_dict_round_trip(self, message):
        data = message.model_dump(by_alias=True)
        assert data["from"] == "dfsp1"
        assert data["metadata"]["trace"]["traceId"] == message.metadata.trace.trace_id
        assert data["metadata"]["trace"]["finishTimestamp"] == "2024-01-15T10:30:01.500Z"
        assert data["metadata"]["event"]["createdAt"] == "2024-01-15T10:30:00.000Z"

        restored = EventMessage.model_validate(data)
        assert restored == message
        assert restored.metadata.trace.parent_span_id == message.metadata.trace.parent_span_id

    def test_json_round_trip(self, message):
        data: dict[str, Any] = json.loads(message.model_dump_json(by_alias=True))
        assert data["metadata"]["event"]["action"] == "default"

        restored = EventMessage.model_validate(data)
        assert restored == message

    def test_round_trip_rejects_tampered_pair(self, message):
        data = message.model_dump(by_alias=True, mode="json")
        data["metadata"]["event"]["action"] = "debug"
        with pytest.raises(ValidationError, match="not allowed"):
            EventMessage.model_validate(data)

    def test_round_trip_rejects_tampered_trace_id(self, message):
        data = message.model_dump(by_alias=True, mode="json")
        data["metadata"]["trace"]["traceId"] = "XYZ"
        with pytest.raises(ValidationError, match="Invalid traceId"):
            EventMessage.model_validate(data)


class TestLogResponse:
    def test_default_status(self):
        assert LogResponse().status is LogResponseStatus.UNDEFINED

    def test_explicit_status(self):
        assert LogResponse(status="accepted").status is LogResponseStatus.ACCEPTED

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            LogResponse(status="lost")


class TestOwnership:
    def test_caller_trace_changes_do_not_leak(self, ok_state, trace_id, span_id):
        trace = EventTraceMetadata(service="svc-a", trace_id=trace_id, span_id=span_id)
        event = EventMetadata.log("evt-1", "info", "2024-01-15T10:30:00.000Z", ok_state)
        msg = EventMessage(type="t", content=None)
        msg.metadata = MessageMetadata(event=event, trace=trace)

        trace.finish("2030-01-01T00:00:00.000Z")
        trace.service = "mutated"

        assert msg.metadata.trace is not trace
        assert msg.metadata.trace.finish_timestamp is None
        assert msg.metadata.trace.service == "svc-a"

    def test_finish_through_envelope(self, message):
        message.metadata.trace.finish("2024-01-15T10:31:00.000Z")
        assert message.metadata.trace.finish_timestamp == "2024-01-15T10:31:00.000Z"

    def test_metadata_not_shared_across_envelopes(self, message):
        shared = message.metadata
        first = EventMessage(type="t", content=1, metadata=shared)
        second = EventMessage(type="t", content=2)
        second.metadata = shared

        assert first.metadata is not shared
        assert second.metadata is not shared
        assert first.metadata.trace is not second.metadata.trace

        first.metadata.trace.finish("2031-01-01T00:00:00.000Z")
        assert second.metadata.trace.finish_timestamp == shared.trace.finish_timestamp
        assert second.metadata == shared
