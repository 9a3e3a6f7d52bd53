# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

Transport errors raised while posting to a webhook routinely embed the
request URL, and a Slack incoming webhook URL is itself the credential.
Error text is passed through these helpers before it is logged or placed
in a ModelDeliveryOutcome.

Example:
    >>> from puppet_report_slack.utils import sanitize_error_message
    >>> try:
    ...     raise ValueError("POST https://hooks.slack.com/services/T0/B0/abc failed")
    ... except Exception as e:
    ...     safe_msg = sanitize_error_message(e)
    >>> "hooks.slack.com" not in safe_msg
    True
"""

from __future__ import annotations

# Checked case-insensitively against the error text.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Webhook endpoints (the URL path is the secret)
    "hooks.slack.com",
    "/services/",
    "webhook",
    # Credentials
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "api-key",
    # Authentication
    "credential",
    "bearer",
    "authorization",
    "xoxb-",
    "xoxp-",
    # Certificate and key material
    "-----begin",
    "-----end",
)


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw error string for safe inclusion in logs and outcomes.

    Use this for response bodies and other text that is not an exception.

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        The string, truncated to ``max_length``, or a redaction marker when
        a sensitive pattern is present.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


def sanitize_error_message(exception: Exception, max_length: int = 500) -> str:
    """Sanitize an exception message for safe inclusion in logs and outcomes.

    Args:
        exception: The exception to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        ``"{ExceptionType}: {sanitized_message}"``. When a sensitive pattern
        is found only the exception type is kept.
    """
    exception_type = type(exception).__name__
    exception_str = str(exception)

    exception_lower = exception_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in exception_lower:
            return f"{exception_type}: [REDACTED - potentially sensitive data]"

    if len(exception_str) > max_length:
        exception_str = exception_str[:max_length] + "... [truncated]"

    return f"{exception_type}: {exception_str}"


__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "sanitize_error_message",
    "sanitize_error_string",
]
