# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Notification configuration model.

Validated form of ``slack.yaml``. Constructed once per run by
``load_notification_config`` and passed explicitly to the renderer and the
dispatcher; nothing holds it as global state.

Configuration File Structure:
    ```yaml
    webhook: https://hooks.slack.com/services/T000/B000/XXXX
    channels:
      - '#ops'
      - '\\#alerts'
    statuses: changed,failed
    username: puppet
    ```
"""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_STATUSES: frozenset[str] = frozenset({"changed", "failed"})
DEFAULT_USERNAME: str = "puppet"


class ModelNotificationConfig(BaseModel):
    """Webhook endpoint, target channels, status filter and display name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    webhook_url: str = Field(..., description="Slack incoming webhook URL (https)")
    channels: tuple[str, ...] = Field(..., description="Channels to post to, in order")
    statuses: frozenset[str] = Field(
        default=DEFAULT_STATUSES,
        description="Run statuses that trigger a notification",
    )
    username: str = Field(default=DEFAULT_USERNAME, description="Display username")

    def __repr__(self) -> str:
        """Mask the webhook URL; it is a bearer credential."""
        return (
            f"<{type(self).__name__} channels={list(self.channels)} "
            f"statuses={sorted(self.statuses)}>"
        )

    @field_validator("webhook_url")
    @classmethod
    def _require_https(cls, value: str) -> str:
        parsed = urlparse(value.strip())
        if parsed.scheme != "https" or not parsed.netloc:
            raise ValueError("webhook must be an absolute https:// URL")
        return value.strip()

    @field_validator("channels", mode="before")
    @classmethod
    def _coerce_channels(cls, value: object) -> object:
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("channels")
    @classmethod
    def _require_channels(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one channel is required")
        return value

    @field_validator("statuses", mode="before")
    @classmethod
    def _split_statuses(cls, value: object) -> object:
        if value is None:
            return DEFAULT_STATUSES
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(item).strip() for item in value if str(item).strip())
        return value

    @field_validator("username", mode="before")
    @classmethod
    def _default_username(cls, value: object) -> object:
        if value is None or value == "":
            return DEFAULT_USERNAME
        return value


__all__ = ["DEFAULT_STATUSES", "DEFAULT_USERNAME", "ModelNotificationConfig"]
