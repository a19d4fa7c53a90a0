"""ISO-8601 timestamp helpers shared by every model that carries a time."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AwareDatetime, BeforeValidator, TypeAdapter, ValidationError

# Extended date-time with a ``T`` separator and an explicit ``Z`` or offset.
TIMESTAMP_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?(Z|[+-]\d{2}:\d{2})"
)

_aware_datetime: TypeAdapter[AwareDatetime] = TypeAdapter(AwareDatetime)


def format_timestamp(value: datetime) -> str:
    """Render *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ``; naive means UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_timestamp() -> str:
    return format_timestamp(datetime.now(timezone.utc))


def is_valid_timestamp(value: object) -> bool:
    if not isinstance(value, str) or TIMESTAMP_PATTERN.fullmatch(value) is None:
        return False
    try:
        _aware_datetime.validate_python(value)
    except ValidationError:
        return False
    return True


def normalize_timestamp(value: object) -> object:
    """Pydantic before-validator: datetimes are formatted, strings kept verbatim.

    Strings must be a full date-time such as ``2024-01-15T10:30:00.000Z``;
    date-only, basic-format and space-separated forms are rejected. Anything
    else is handed on to the field's own type check.
    """
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, str) and not is_valid_timestamp(value):
        raise ValueError(f"Invalid ISO-8601 timestamp: {value!r}")
    return value


IsoTimestamp = Annotated[str, BeforeValidator(normalize_timestamp)]
OptionalIsoTimestamp = Annotated[str | None, BeforeValidator(normalize_timestamp)]
