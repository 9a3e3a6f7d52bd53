# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack incoming webhook payload models.

Wire schema::

    {
      "username": "puppet",
      "attachments": [
        {"pretext": "...", "text": "...", "mrkdwn_in": ["text", "pretext"],
         "color": "good"}
      ],
      "channel": "ops"
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSlackAttachment(BaseModel):
    """Single legacy attachment with markdown enabled for text and pretext."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pretext: str
    text: str
    mrkdwn_in: tuple[str, ...] = Field(default=("text", "pretext"))
    color: str


class ModelSlackPayload(BaseModel):
    """Webhook request body for one channel."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    username: str
    attachments: tuple[ModelSlackAttachment, ...]
    channel: str

    def to_wire(self) -> dict[str, object]:
        """JSON-compatible dict in wire field order."""
        return self.model_dump(mode="json")


__all__ = ["ModelSlackAttachment", "ModelSlackPayload"]
