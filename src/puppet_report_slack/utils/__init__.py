# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules.

    - util_error_sanitization: Credential-safe error text for logs and outcomes
    - util_url_redaction: Webhook URL redaction for log fields
"""

from puppet_report_slack.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_message,
    sanitize_error_string,
)
from puppet_report_slack.utils.util_url_redaction import redact_url

__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "redact_url",
    "sanitize_error_message",
    "sanitize_error_string",
]
