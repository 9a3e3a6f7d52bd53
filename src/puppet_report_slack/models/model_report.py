# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Run report model.

Read-only view of a completed Puppet run: host, environment, overall
status, per-resource statuses and log entries. Any caller, whether the
report loader or an embedding orchestrator, must supply these fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from puppet_report_slack.models.model_log_entry import ModelLogEntry
from puppet_report_slack.models.model_resource_status import ModelResourceStatus


class ModelReport(BaseModel):
    """Immutable Puppet run report.

    ``status`` is kept as a plain string: Puppet may report values outside
    the known taxonomy, and those still render (as an unknown status).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    host: str = Field(..., description="Node certname the run executed on")
    environment: str = Field(default="production", description="Puppet environment")
    status: str = Field(..., description="Overall run status")
    resource_statuses: dict[str, ModelResourceStatus] = Field(default_factory=dict)
    logs: tuple[ModelLogEntry, ...] = Field(default_factory=tuple)

    @field_validator("resource_statuses", "logs", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            return {} if info.field_name == "resource_statuses" else ()
        return value


__all__ = ["ModelReport"]
