# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Puppet Log Level Enum.

Levels emitted by Puppet in report log entries, from least to most severe.
"""

from enum import Enum


class EnumLogLevel(str, Enum):
    """Severity of a Puppet report log entry."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERR = "err"
    ALERT = "alert"
    EMERG = "emerg"
    CRIT = "crit"


__all__ = ["EnumLogLevel"]
