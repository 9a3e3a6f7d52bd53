# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for puppet_report_slack unit tests.

Builders for reports, log entries and mocked aiohttp sessions live in
``report_factories``.
"""
