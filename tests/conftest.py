"""Shared fixtures for telemetry_envelope tests."""

from __future__ import annotations

import pytest

from telemetry_envelope.events.metadata import EventStateMetadata
from telemetry_envelope.tracing.random_source import SeededRandomSource, set_random_source

TRACE_ID = "4bf92f3577b34da6a3ce929d0e0e4736"
SPAN_ID = "00f067aa0ba902b7"
PARENT_SPAN_ID = "b7ad6b7169203331"


@pytest.fixture
def trace_id():
    return TRACE_ID


@pytest.fixture
def span_id():
    return SPAN_ID


@pytest.fixture
def parent_span_id():
    return PARENT_SPAN_ID


@pytest.fixture
def ok_state():
    return EventStateMetadata.success(code=200, description="delivered")


@pytest.fixture
def seeded_source():
    """Install a deterministic random source for the duration of a test."""
    source = SeededRandomSource(seed=42)
    previous = set_random_source(source)
    yield source
    set_random_source(previous)
