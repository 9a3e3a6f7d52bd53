# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Resource status model.

Read-only view of one entry of a Puppet report's ``resource_statuses``
mapping. Only the fields needed for notification rendering are kept; the
remaining Puppet attributes (events, tags, file/line, timings) are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelResourceStatus(BaseModel):
    """Outcome flags for a single managed resource.

    Classification is computed from the flags rather than stored; see
    ``puppet_report_slack.rendering.status_classifier.status_of``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    resource_type: str = Field(..., description="Puppet resource type, e.g. File")
    title: str = Field(..., description="Resource title, e.g. /etc/motd")
    changed: bool = Field(default=False)
    failed: bool = Field(default=False)
    skipped: bool = Field(default=False)

    @property
    def reference(self) -> str:
        """Puppet resource reference, ``Type[title]``."""
        return f"{self.resource_type}[{self.title}]"


__all__ = ["ModelResourceStatus"]
