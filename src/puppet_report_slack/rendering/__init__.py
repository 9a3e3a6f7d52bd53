# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Status classification and message rendering."""

from puppet_report_slack.rendering.message_renderer import render
from puppet_report_slack.rendering.status_classifier import (
    classify_resource,
    classify_run,
    status_of,
)

__all__: list[str] = ["classify_resource", "classify_run", "render", "status_of"]
