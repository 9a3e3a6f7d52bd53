# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for Puppet report notification processing."""

from puppet_report_slack.enums.enum_log_level import EnumLogLevel
from puppet_report_slack.enums.enum_run_status import EnumRunStatus

__all__: list[str] = ["EnumLogLevel", "EnumRunStatus"]
