# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Delivery handlers."""

from puppet_report_slack.handlers.handler_slack_webhook import (
    HandlerSlackWebhook,
    build_payload,
    normalize_channel,
)

__all__: list[str] = ["HandlerSlackWebhook", "build_payload", "normalize_channel"]
