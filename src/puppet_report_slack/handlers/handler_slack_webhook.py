# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack Webhook Handler - Channel Dispatcher for run notifications.

This handler posts a rendered run notification to every configured channel
through a Slack incoming webhook.

Handler Responsibilities:
    - Skip dispatch when the run status is not in the configured filter
    - Normalize channel names (strip one leading backslash)
    - Build the attachment payload for each channel
    - POST the payload over HTTPS (port 443), one request per channel
    - Record one ModelDeliveryOutcome per channel; success iff HTTP 200
    - Sanitize errors to prevent webhook URL exposure

Delivery Semantics:
    Each channel is attempted exactly once. There are no retries, no backoff
    and no timeout beyond aiohttp's defaults. A failure on one channel is
    logged and recorded but never stops delivery to the others, and never
    raises out of ``dispatch``.

Coroutine Safety:
    Channels are posted concurrently. Each channel coroutine returns its own
    outcome; the only shared state is the read-only rendered message and
    configuration.
"""

from __future__ import annotations

import asyncio
import logging
import time
from uuid import UUID, uuid4

import aiohttp
from yarl import URL

from puppet_report_slack.errors import DeliveryError, ModelErrorContext
from puppet_report_slack.models import (
    ModelDeliveryOutcome,
    ModelNotificationConfig,
    ModelRenderedMessage,
    ModelSlackAttachment,
    ModelSlackPayload,
)
from puppet_report_slack.utils import (
    redact_url,
    sanitize_error_message,
    sanitize_error_string,
)

logger = logging.getLogger(__name__)

_HTTPS_PORT: int = 443
_SUCCESS_STATUS: int = 200
_MAX_BODY_CHARS: int = 500


def normalize_channel(channel: str) -> str:
    """Strip a single leading backslash left over from escaped config values."""
    if channel.startswith("\\"):
        return channel[1:]
    return channel


def build_payload(
    rendered: ModelRenderedMessage,
    config: ModelNotificationConfig,
    channel: str,
) -> ModelSlackPayload:
    """Build the webhook payload for one channel."""
    return ModelSlackPayload(
        username=config.username,
        attachments=(
            ModelSlackAttachment(
                pretext=rendered.pretext,
                text=rendered.body,
                color=rendered.color,
            ),
        ),
        channel=channel,
    )


class HandlerSlackWebhook:
    """Handler for run notification delivery via Slack incoming webhook.

    Error Handling:
        Delivery failures (non-200 responses, connection errors, timeouts)
        are captured in ModelDeliveryOutcome. The handler never raises for a
        delivery failure; a partially delivered batch is a normal result.

    Attributes:
        _http_session: Optional shared aiohttp session. When absent, a session
            is created for each dispatch and closed afterwards.

    Example:
        >>> handler = HandlerSlackWebhook()
        >>> # outcomes = await handler.dispatch(rendered, config)
        >>> # [o.channel for o in outcomes if not o.succeeded]
    """

    def __init__(self, http_session: aiohttp.ClientSession | None = None) -> None:
        self._http_session = http_session

    def __repr__(self) -> str:
        shared = self._http_session is not None
        return f"<{type(self).__name__} shared_session={shared}>"

    async def dispatch(
        self,
        rendered: ModelRenderedMessage,
        config: ModelNotificationConfig,
        correlation_id: UUID | None = None,
    ) -> list[ModelDeliveryOutcome]:
        """Deliver a rendered message to every configured channel.

        Args:
            rendered: Message produced by the renderer.
            config: Webhook URL, channels, status filter and username.
            correlation_id: Optional ID shared by all outcomes and log lines.
                A new one is generated when omitted.

        Returns:
            One outcome per channel in configured order, or an empty list when
            the run status is filtered out.
        """
        correlation_id = correlation_id or uuid4()

        if rendered.status not in config.statuses:
            logger.debug(
                "Run status not in notification filter, skipping dispatch",
                extra={
                    "correlation_id": str(correlation_id),
                    "status": rendered.status,
                    "statuses": sorted(config.statuses),
                },
            )
            return []

        url = URL(config.webhook_url).with_port(_HTTPS_PORT)

        session_created = False
        session = self._http_session
        if session is None:
            session = aiohttp.ClientSession()
            session_created = True

        try:
            outcomes = await asyncio.gather(
                *(
                    self._deliver(
                        session=session,
                        url=url,
                        payload=build_payload(rendered, config, normalize_channel(channel)),
                        correlation_id=correlation_id,
                    )
                    for channel in config.channels
                )
            )
        finally:
            if session_created:
                await session.close()

        delivered = sum(1 for outcome in outcomes if outcome.succeeded)
        logger.debug(
            "Dispatch complete",
            extra={
                "correlation_id": str(correlation_id),
                "webhook": redact_url(config.webhook_url),
                "delivered": delivered,
                "attempted": len(outcomes),
            },
        )
        return list(outcomes)

    async def _deliver(
        self,
        session: aiohttp.ClientSession,
        url: URL,
        payload: ModelSlackPayload,
        correlation_id: UUID,
    ) -> ModelDeliveryOutcome:
        """Post to one channel and convert the result into an outcome."""
        start_time = time.perf_counter()
        channel = payload.channel

        try:
            await self._post(session, url, payload, correlation_id)
        except DeliveryError as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            return ModelDeliveryOutcome(
                channel=channel,
                succeeded=False,
                http_status=e.http_status,
                error_detail=e.message,
                correlation_id=correlation_id,
                duration_ms=duration_ms,
            )
        except Exception as e:
            # Anything else stays confined to this channel's outcome
            duration_ms = (time.perf_counter() - start_time) * 1000
            error = sanitize_error_message(e)
            logger.error(
                "Unexpected error posting to slack channel %s: %s",
                channel,
                error,
                extra={
                    "correlation_id": str(correlation_id),
                    "channel": channel,
                    "error_type": type(e).__name__,
                },
            )
            return ModelDeliveryOutcome(
                channel=channel,
                succeeded=False,
                error_detail=error,
                correlation_id=correlation_id,
                duration_ms=duration_ms,
            )

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Notification sent to slack channel: %s",
            channel,
            extra={
                "correlation_id": str(correlation_id),
                "channel": channel,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return ModelDeliveryOutcome(
            channel=channel,
            succeeded=True,
            http_status=_SUCCESS_STATUS,
            correlation_id=correlation_id,
            duration_ms=duration_ms,
        )

    async def _post(
        self,
        session: aiohttp.ClientSession,
        url: URL,
        payload: ModelSlackPayload,
        correlation_id: UUID,
    ) -> None:
        """Issue a single POST for one channel.

        Raises:
            DeliveryError: On any non-200 response or transport failure.
        """
        channel = payload.channel
        context = ModelErrorContext(
            operation="post",
            target_name=channel,
            correlation_id=correlation_id,
        )

        try:
            async with session.post(url, json=payload.to_wire()) as response:
                if response.status == _SUCCESS_STATUS:
                    return

                body = sanitize_error_string(
                    await response.text(errors="replace"), max_length=_MAX_BODY_CHARS
                )
                logger.error(
                    "POST returned %s %s (body=%s)",
                    response.status,
                    response.reason,
                    body,
                    extra={
                        "correlation_id": str(correlation_id),
                        "channel": channel,
                        "status_code": response.status,
                    },
                )
                raise DeliveryError(
                    f"{response.status} {response.reason} (body={body})",
                    channel=channel,
                    http_status=response.status,
                    context=context,
                )

        except TimeoutError as e:
            error = "Request timeout"
            logger.error(
                "Slack webhook timeout",
                extra={"correlation_id": str(correlation_id), "channel": channel},
            )
            raise DeliveryError(error, channel=channel, context=context) from e

        except aiohttp.ClientError as e:
            error = sanitize_error_message(e)
            logger.error(
                "Slack webhook request failed: %s",
                error,
                extra={
                    "correlation_id": str(correlation_id),
                    "channel": channel,
                    "error_type": type(e).__name__,
                },
            )
            raise DeliveryError(error, channel=channel, context=context) from e


__all__: list[str] = ["HandlerSlackWebhook", "build_payload", "normalize_channel"]
