# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error classes for Puppet report notification processing."""

from puppet_report_slack.errors.model_error_context import ModelErrorContext
from puppet_report_slack.errors.report_errors import (
    ConfigurationError,
    DeliveryError,
    PuppetSlackError,
    ReportValidationError,
)

__all__: list[str] = [
    "ConfigurationError",
    "DeliveryError",
    "ModelErrorContext",
    "PuppetSlackError",
    "ReportValidationError",
]
