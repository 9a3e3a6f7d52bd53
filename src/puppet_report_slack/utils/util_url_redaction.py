# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Webhook URL redaction for log output."""

from __future__ import annotations

from urllib.parse import urlparse


def redact_url(url: str) -> str:
    """Redact a URL to ``<scheme>://<host>/***<last4chars>``.

    Example:
        >>> redact_url("https://hooks.slack.com/services/T00/B00/abcd1234")
        'https://hooks.slack.com/***1234'
    """
    if not url:
        return ""

    full_str = url.strip()
    last4 = full_str if len(full_str) <= 4 else full_str[-4:]
    try:
        parsed = urlparse(full_str)
    except ValueError:
        return f"***{last4}"

    if not parsed.netloc:
        return f"***{last4}"

    scheme = parsed.scheme or "https"
    return f"{scheme}://{parsed.netloc}/***{last4}"


__all__: list[str] = ["redact_url"]
