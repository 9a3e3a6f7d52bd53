# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Notification Configuration Loader.

Loads ``slack.yaml`` and validates it into a ModelNotificationConfig.

Path Resolution:
    1. Explicit ``config_path`` argument
    2. ``PUPPET_SLACK_CONFIG`` environment variable
    3. ``slack.yaml`` in Puppet's configuration directory
       (``PUPPET_CONFDIR``, default ``/etc/puppetlabs/puppet``)

File Structure:
    ```yaml
    webhook: https://hooks.slack.com/services/T000/B000/XXXX
    channels:
      - ops
      - alerts
    statuses: changed,failed   # optional
    username: puppet           # optional
    ```

When ``webhook`` is absent from the file, ``SLACK_WEBHOOK_URL`` is used.

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - The webhook URL is never included in error messages or log fields
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from puppet_report_slack.errors import ConfigurationError, ModelErrorContext
from puppet_report_slack.models import ModelNotificationConfig
from puppet_report_slack.utils import redact_url, sanitize_error_string

logger = logging.getLogger(__name__)

CONFIG_FILENAME: str = "slack.yaml"
DEFAULT_PUPPET_CONFDIR: str = "/etc/puppetlabs/puppet"
MAX_CONFIG_SIZE_BYTES: int = 1024 * 1024

ENV_CONFIG_PATH: str = "PUPPET_SLACK_CONFIG"
ENV_PUPPET_CONFDIR: str = "PUPPET_CONFDIR"
ENV_WEBHOOK_URL: str = "SLACK_WEBHOOK_URL"


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    """Resolve the configuration file location (see module docstring)."""
    if config_path is not None:
        return Path(config_path)

    env_path = os.getenv(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)

    confdir = os.getenv(ENV_PUPPET_CONFDIR, DEFAULT_PUPPET_CONFDIR)
    return Path(confdir) / CONFIG_FILENAME


def load_notification_config(
    config_path: str | Path | None = None,
) -> ModelNotificationConfig:
    """Load and validate the Slack notification configuration.

    Args:
        config_path: Path to ``slack.yaml``. Resolved from the environment
            when omitted.

    Returns:
        Validated ModelNotificationConfig.

    Raises:
        ConfigurationError: If the file is missing, unreadable, too large,
            not valid YAML, not a mapping, or fails validation.
    """
    path = resolve_config_path(config_path)
    context = ModelErrorContext(operation="load_config", target_name=str(path))

    if not path.is_file():
        raise ConfigurationError(
            "Slack report config file not readable",
            context=context,
        )

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE_BYTES:
            raise ConfigurationError(
                f"Config file too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
                context=context,
            )
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Slack report config file not readable: {e.strerror}",
            context=context,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config: {sanitize_error_string(str(e))}",
            context=context,
        ) from e

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Config must be a mapping, got {type(raw).__name__}",
            context=context,
        )

    config = parse_notification_config(raw, context=context)

    logger.debug(
        "Loaded Slack notification config",
        extra={
            "config_path": str(path),
            "webhook": redact_url(config.webhook_url),
            "channels": list(config.channels),
            "statuses": sorted(config.statuses),
        },
    )
    return config


def parse_notification_config(
    raw: dict[str, object],
    context: ModelErrorContext | None = None,
) -> ModelNotificationConfig:
    """Validate an already-parsed configuration mapping.

    Raises:
        ConfigurationError: If required keys are missing or values are invalid.
    """
    context = context or ModelErrorContext(operation="parse_config")

    webhook = raw.get("webhook") or os.getenv(ENV_WEBHOOK_URL)
    if not webhook:
        raise ConfigurationError("Config is missing 'webhook'", context=context)
    if "channels" not in raw or raw["channels"] is None:
        raise ConfigurationError("Config is missing 'channels'", context=context)

    try:
        return ModelNotificationConfig(
            webhook_url=str(webhook),
            channels=raw["channels"],
            statuses=raw.get("statuses"),
            username=raw.get("username"),
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid Slack report config: {problems}",
            context=context,
        ) from e


__all__: list[str] = [
    "CONFIG_FILENAME",
    "load_notification_config",
    "parse_notification_config",
    "resolve_config_path",
]
