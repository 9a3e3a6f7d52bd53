# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Context Model.

Bundles the structured fields attached to every ``PuppetSlackError`` so that
error constructors keep a short signature.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelErrorContext(BaseModel):
    """Structured context for report processing errors.

    Attributes:
        operation: Operation being performed (load_config, load_report, post, ...)
        target_name: Target file, channel or endpoint name
        correlation_id: Dispatch correlation ID for log correlation

    Example:
        >>> context = ModelErrorContext(
        ...     operation="load_config",
        ...     target_name="/etc/puppetlabs/puppet/slack.yaml",
        ... )
        >>> raise ConfigurationError("Config file not readable", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (load_config, post, etc.)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target file, channel or endpoint name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Dispatch correlation ID",
    )


__all__ = ["ModelErrorContext"]
