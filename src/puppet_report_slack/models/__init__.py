# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for reports, configuration, messages and outcomes."""

from puppet_report_slack.models.model_delivery_outcome import ModelDeliveryOutcome
from puppet_report_slack.models.model_log_entry import ModelLogEntry
from puppet_report_slack.models.model_notification_config import (
    DEFAULT_STATUSES,
    DEFAULT_USERNAME,
    ModelNotificationConfig,
)
from puppet_report_slack.models.model_rendered_message import ModelRenderedMessage
from puppet_report_slack.models.model_report import ModelReport
from puppet_report_slack.models.model_resource_status import ModelResourceStatus
from puppet_report_slack.models.model_slack_payload import (
    ModelSlackAttachment,
    ModelSlackPayload,
)
from puppet_report_slack.models.model_status_display import ModelStatusDisplay

__all__: list[str] = [
    "DEFAULT_STATUSES",
    "DEFAULT_USERNAME",
    "ModelDeliveryOutcome",
    "ModelLogEntry",
    "ModelNotificationConfig",
    "ModelRenderedMessage",
    "ModelReport",
    "ModelResourceStatus",
    "ModelSlackAttachment",
    "ModelSlackPayload",
    "ModelStatusDisplay",
]
