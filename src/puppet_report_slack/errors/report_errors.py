# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Report Processing Error Classes.

Error Hierarchy:
    PuppetSlackError (base)
    ├── ConfigurationError
    ├── ReportValidationError
    └── DeliveryError

Propagation:
    - ConfigurationError and ReportValidationError propagate to the caller;
      the notification cannot be produced at all.
    - DeliveryError is raised for a single channel and converted into a failed
      ModelDeliveryOutcome by the dispatcher. It never escapes a dispatch.

All errors support chaining with ``raise ... from e`` and carry a
ModelErrorContext with the operation and target involved.
"""

from typing import Optional

from puppet_report_slack.errors.model_error_context import ModelErrorContext


class PuppetSlackError(Exception):
    """Base error class for report processing.

    Example:
        >>> context = ModelErrorContext(operation="render", target_name="web1")
        >>> raise PuppetSlackError("Rendering failed", context=context)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize PuppetSlackError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled context (operation, target_name, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or ModelErrorContext()
        self.extra_context: dict[str, object] = dict(extra_context)

    @property
    def correlation_id(self) -> object:
        return self.context.correlation_id

    def __str__(self) -> str:
        if self.context.target_name:
            return f"{self.message} [{self.context.target_name}]"
        return self.message


class ConfigurationError(PuppetSlackError):
    """Raised when the notification configuration is missing or malformed.

    Fatal: raised before any network call is attempted.

    Example:
        >>> raise ConfigurationError(
        ...     "Slack report config file not readable",
        ...     context=ModelErrorContext(
        ...         operation="load_config",
        ...         target_name="/etc/puppetlabs/puppet/slack.yaml",
        ...     ),
        ... )
    """


class ReportValidationError(PuppetSlackError):
    """Raised when a run report cannot be loaded or is structurally invalid."""


class DeliveryError(PuppetSlackError):
    """Raised when a single channel delivery fails.

    Attributes:
        http_status: HTTP status code returned by the webhook, if any
        channel: Normalized channel name the delivery targeted
    """

    def __init__(
        self,
        message: str,
        channel: str,
        http_status: Optional[int] = None,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(message, context=context, **extra_context)
        self.channel = channel
        self.http_status = http_status


__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "PuppetSlackError",
    "ReportValidationError",
]
