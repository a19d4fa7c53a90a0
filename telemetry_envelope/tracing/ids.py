"""Trace/span/event identifier validators and generators."""

from __future__ import annotations

import re
import uuid

from telemetry_envelope.tracing.random_source import RandomSource, get_random_source

TRACE_ID_PATTERN = re.compile(r"[0-9a-f]{32}")
SPAN_ID_PATTERN = re.compile(r"[0-9a-f]{16}")

TRACE_ID_BYTES = 16
SPAN_ID_BYTES = 8


def is_valid_trace_id(value: object) -> bool:
    return isinstance(value, str) and TRACE_ID_PATTERN.fullmatch(value) is not None


def is_valid_span_id(value: object) -> bool:
    return isinstance(value, str) and SPAN_ID_PATTERN.fullmatch(value) is not None


def new_trace_id(source: RandomSource | None = None) -> str:
    """128-bit trace id as 32 lowercase hex chars."""
    return (source or get_random_source()).random_bytes(TRACE_ID_BYTES).hex()


def new_span_id(source: RandomSource | None = None) -> str:
    """64-bit span id as 16 lowercase hex chars."""
    return (source or get_random_source()).random_bytes(SPAN_ID_BYTES).hex()


def new_event_id(source: RandomSource | None = None) -> str:
    """UUID4-shaped string drawn from the active random source."""
    raw = (source or get_random_source()).random_bytes(16)
    return str(uuid.UUID(bytes=raw, version=4))
