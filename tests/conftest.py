# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for puppet_report_slack tests."""

from __future__ import annotations

import pytest

from puppet_report_slack.models import ModelNotificationConfig
from tests.helpers.report_factories import WEBHOOK_URL


@pytest.fixture(autouse=True)
def _clear_puppet_slack_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ambient configuration variables for test isolation.

    Prevents SLACK_WEBHOOK_URL, PUPPET_SLACK_CONFIG and PUPPET_CONFDIR present
    in the developer's shell from leaking into config path resolution.
    """
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("PUPPET_SLACK_CONFIG", raising=False)
    monkeypatch.delenv("PUPPET_CONFDIR", raising=False)


@pytest.fixture
def webhook_url() -> str:
    """Return test webhook URL."""
    return WEBHOOK_URL


@pytest.fixture
def config(webhook_url: str) -> ModelNotificationConfig:
    """Two-channel configuration with default status filter and username."""
    return ModelNotificationConfig(webhook_url=webhook_url, channels=("ops", "alerts"))
