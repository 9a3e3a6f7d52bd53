# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Report processing entry points.

``process_report`` is the boundary an orchestrator calls once per completed
run: it renders the report and dispatches the message, returning one
outcome per channel. Configuration is passed in explicitly.

``run_notification`` is the synchronous, file-based variant used by the
CLI: it loads the configuration first (so a configuration problem fails
before anything else happens), then the report, then processes it.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from uuid import UUID, uuid4

import aiohttp

from puppet_report_slack.config import load_notification_config
from puppet_report_slack.handlers import HandlerSlackWebhook
from puppet_report_slack.models import (
    ModelDeliveryOutcome,
    ModelNotificationConfig,
    ModelReport,
)
from puppet_report_slack.rendering import render
from puppet_report_slack.report import load_report

logger = logging.getLogger(__name__)


async def process_report(
    report: ModelReport,
    config: ModelNotificationConfig,
    *,
    http_session: aiohttp.ClientSession | None = None,
    correlation_id: UUID | None = None,
) -> list[ModelDeliveryOutcome]:
    """Render a run report and deliver it to every configured channel.

    Args:
        report: Completed run report.
        config: Notification configuration for this deployment.
        http_session: Optional shared aiohttp session.
        correlation_id: Optional ID attached to every outcome and log line.

    Returns:
        One outcome per channel, or an empty list when the run status is not
        in ``config.statuses``.

    Raises:
        ReportValidationError: If the report cannot be rendered.
    """
    correlation_id = correlation_id or uuid4()
    rendered = render(report, config)
    outcomes = await HandlerSlackWebhook(http_session=http_session).dispatch(
        rendered, config, correlation_id=correlation_id
    )

    failed = [outcome.channel for outcome in outcomes if not outcome.succeeded]
    if failed:
        logger.warning(
            "Slack notification not delivered to %d of %d channel(s)",
            len(failed),
            len(outcomes),
            extra={
                "correlation_id": str(correlation_id),
                "host": report.host,
                "failed_channels": failed,
            },
        )
    return outcomes


def run_notification(
    report_path: str | Path,
    config_path: str | Path | None = None,
) -> list[ModelDeliveryOutcome]:
    """Load configuration and report from disk, then process the report.

    Raises:
        ConfigurationError: If the configuration is missing or invalid.
        ReportValidationError: If the report is missing or invalid.
    """
    config = load_notification_config(config_path)
    report = load_report(report_path)
    return asyncio.run(process_report(report, config))


__all__: list[str] = ["process_report", "run_notification"]
