"""Acknowledgement marker returned by whatever consumes an EventMessage."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LogResponseStatus(str, Enum):
    UNDEFINED = "undefined"
    PENDING = "pending"
    ACCEPTED = "accepted"
    ERROR = "error"


class LogResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: LogResponseStatus = LogResponseStatus.UNDEFINED
