# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Status display model: canonical name plus Slack color and icon."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelStatusDisplay(BaseModel):
    """Classified status with its attachment color and emoji icon."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Canonical status name")
    color: str = Field(..., description="Attachment side-bar color")
    icon: str = Field(..., description="Slack emoji shortcode")


__all__ = ["ModelStatusDisplay"]
