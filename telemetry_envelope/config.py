"""Environment-driven defaults for span creation.

Variables (all optional, ``.env`` is loaded on package import):
  TELEMETRY_SERVICE_NAME — service recorded on new root spans
  TELEMETRY_SAMPLED      — integer ``sampled`` flag for new root spans
"""

from __future__ import annotations

import os

SERVICE_NAME_ENV = "TELEMETRY_SERVICE_NAME"
SAMPLED_ENV = "TELEMETRY_SAMPLED"
DEFAULT_SERVICE_NAME = "unknown-service"


def service_name() -> str:
    return os.environ.get(SERVICE_NAME_ENV) or DEFAULT_SERVICE_NAME


def default_sampled() -> int | None:
    raw = os.environ.get(SAMPLED_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{SAMPLED_ENV} must be an integer, got {raw!r}") from None
