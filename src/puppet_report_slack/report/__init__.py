# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Puppet report loading."""

from puppet_report_slack.report.report_loader import (
    PuppetReportLoader,
    load_report,
    parse_report,
)

__all__: list[str] = ["PuppetReportLoader", "load_report", "parse_report"]
