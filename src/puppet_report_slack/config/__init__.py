# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Notification configuration loading."""

from puppet_report_slack.config.config_loader import (
    load_notification_config,
    parse_notification_config,
    resolve_config_path,
)

__all__: list[str] = [
    "load_notification_config",
    "parse_notification_config",
    "resolve_config_path",
]
