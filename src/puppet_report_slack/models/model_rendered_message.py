# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Rendered message model.

Output of the message renderer. Derived from a report on every run and
never cached; rendering the same report twice yields an equal instance.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelRenderedMessage(BaseModel):
    """Pretext line, body text and color of a run notification."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pretext: str = Field(..., description="Title line: icon, host, status, environment")
    body: str = Field(..., description="Resource section followed by log section")
    color: str = Field(..., description="Attachment side-bar color")
    status: str = Field(..., description="Overall run status the message describes")


__all__ = ["ModelRenderedMessage"]
