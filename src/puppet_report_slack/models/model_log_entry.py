# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Report log entry model."""

from __future__ import annotations

import re
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from puppet_report_slack.enums import EnumLogLevel

# Puppet writes nanosecond precision; datetime only holds microseconds.
_FRACTION_PATTERN = re.compile(r"(\.\d{6})\d+")
# Ruby Time#to_s separates the offset with a space and omits the colon.
_OFFSET_PATTERN = re.compile(r"\s+([+-]\d{2}):?(\d{2})$")
_DATE_TIME_SEPARATOR = re.compile(r"^(\d{4}-\d{2}-\d{2})\s+")


class ModelLogEntry(BaseModel):
    """One log line of a Puppet run report.

    Naive timestamps are taken to be UTC so that entries from different
    sources can be ordered against each other.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    time: datetime = Field(..., description="When the entry was logged")
    level: EnumLogLevel = Field(..., description="Puppet log level")
    source: str = Field(default="Puppet", description="Emitting resource or component")
    message: str = Field(default="", description="Log text, may span lines")

    @field_validator("time", mode="before")
    @classmethod
    def _normalize_time(cls, value: object) -> object:
        if isinstance(value, str):
            text = _FRACTION_PATTERN.sub(r"\1", value.strip())
            text = _OFFSET_PATTERN.sub(r"\1:\2", text)
            return _DATE_TIME_SEPARATOR.sub(r"\1T", text)
        return value

    @field_validator("time")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        # Ruby symbols serialize as ":err" in some report formats
        if isinstance(value, str):
            return value.strip().lstrip(":").lower()
        return value


__all__ = ["ModelLogEntry"]
