# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Puppet report processor that posts run summaries to Slack.

This package turns a completed Puppet run report into a Slack attachment
and delivers it to one or more channels through an incoming webhook:

- Status classification of the run and of individual resources
- Rendering of changed/failed resources and relevant log lines
- Per-channel webhook delivery with independent outcomes
- YAML configuration loading (``slack.yaml``) and Puppet report loading

Key Components:
    - process_report: Render and dispatch a report (async entry point)
    - run_notification: Synchronous wrapper used by the CLI
    - HandlerSlackWebhook: Channel dispatcher
    - render: Message renderer
"""

from puppet_report_slack.processor import process_report, run_notification

__all__: list[str] = ["process_report", "run_notification"]
