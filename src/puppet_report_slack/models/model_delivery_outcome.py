# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Delivery outcome model: result of posting to a single channel."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelDeliveryOutcome(BaseModel):
    """Per-channel delivery result.

    One outcome is produced per configured channel per dispatch. Outcomes are
    reported and logged, never persisted.

    Attributes:
        channel: Normalized channel name
        succeeded: True only when the webhook answered HTTP 200
        http_status: Response status code, None on transport failure
        error_detail: Sanitized failure description, None on success
        correlation_id: Dispatch correlation ID shared by all channels
        duration_ms: Time spent on this channel's request
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    channel: str
    succeeded: bool
    http_status: int | None = None
    error_detail: str | None = None
    correlation_id: UUID
    duration_ms: float = Field(default=0.0, ge=0.0)


__all__ = ["ModelDeliveryOutcome"]
