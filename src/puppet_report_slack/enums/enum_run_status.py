# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Run Status Enum for Puppet report classification.

Canonical statuses for both the overall run and individual resources.
A resource is in exactly one of these states; classification order is
failed, then skipped, then changed, then unchanged.
"""

from enum import Enum


class EnumRunStatus(str, Enum):
    """Outcome of a Puppet run or of a single managed resource."""

    CHANGED = "changed"
    FAILED = "failed"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"


__all__ = ["EnumRunStatus"]
