# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for HandlerSlackWebhook.

Tests the channel dispatcher's core functionality including:
- Status filter handling
- Channel name normalization
- Wire payload construction
- Per-channel success/failure outcomes
- Error sanitization

All tests use mocked HTTP responses to avoid external dependencies.
"""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import aiohttp
import pytest

from puppet_report_slack.handlers.handler_slack_webhook import (
    HandlerSlackWebhook,
    build_payload,
    normalize_channel,
)
from puppet_report_slack.models import ModelNotificationConfig, ModelRenderedMessage
from tests.helpers.report_factories import make_response, make_session


@pytest.fixture
def rendered() -> ModelRenderedMessage:
    """Rendered message for a changed run."""
    return ModelRenderedMessage(
        pretext=":balloon: web1 *changed* (prod)",
        body="*changed*:  File[/etc/motd]\n",
        color="good",
        status="changed",
    )


class TestNormalizeChannel:
    """Tests for channel name normalization."""

    def test_strips_leading_backslash(self) -> None:
        assert normalize_channel("\\general") == "general"

    def test_plain_name_unchanged(self) -> None:
        assert normalize_channel("general") == "general"

    def test_strips_only_one_backslash(self) -> None:
        assert normalize_channel("\\\\general") == "\\general"

    def test_hash_prefix_preserved(self) -> None:
        assert normalize_channel("\\#ops") == "#ops"


class TestBuildPayload:
    """Tests for wire payload construction."""

    def test_wire_schema(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        payload = build_payload(rendered, config, "ops").to_wire()

        assert payload == {
            "username": "puppet",
            "attachments": [
                {
                    "pretext": ":balloon: web1 *changed* (prod)",
                    "text": "*changed*:  File[/etc/motd]\n",
                    "mrkdwn_in": ["text", "pretext"],
                    "color": "good",
                }
            ],
            "channel": "ops",
        }

    def test_custom_username(
        self, rendered: ModelRenderedMessage, webhook_url: str
    ) -> None:
        config = ModelNotificationConfig(
            webhook_url=webhook_url, channels=("ops",), username="deploybot"
        )
        assert build_payload(rendered, config, "ops").username == "deploybot"


class TestDispatch:
    """Tests for HandlerSlackWebhook.dispatch."""

    @pytest.mark.asyncio
    async def test_filtered_status_makes_no_requests(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        """A status outside the filter is a silent no-op."""
        unchanged = rendered.model_copy(update={"status": "unchanged"})
        mock_session = make_session()

        with patch("aiohttp.ClientSession", return_value=mock_session) as factory:
            outcomes = await HandlerSlackWebhook().dispatch(unchanged, config)

        assert outcomes == []
        mock_session.post.assert_not_called()
        factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_custom_filter_allows_unchanged(
        self, rendered: ModelRenderedMessage, webhook_url: str
    ) -> None:
        config = ModelNotificationConfig(
            webhook_url=webhook_url, channels=("ops",), statuses="unchanged"
        )
        unchanged = rendered.model_copy(update={"status": "unchanged"})
        mock_session = make_session(make_response(200))

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            unchanged, config
        )

        assert [o.succeeded for o in outcomes] == [True]

    @pytest.mark.asyncio
    async def test_one_post_per_channel(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        mock_session = make_session(make_response(200), make_response(200))

        with patch("aiohttp.ClientSession", return_value=mock_session):
            outcomes = await HandlerSlackWebhook().dispatch(rendered, config)

        assert [o.channel for o in outcomes] == ["ops", "alerts"]
        assert all(o.succeeded for o in outcomes)
        assert all(o.http_status == 200 for o in outcomes)
        assert mock_session.post.call_count == 2

        posted_channels = [
            call.kwargs["json"]["channel"] for call in mock_session.post.call_args_list
        ]
        assert posted_channels == ["ops", "alerts"]
        mock_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_posts_over_https_port_443(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        mock_session = make_session(make_response(200), make_response(200))

        await HandlerSlackWebhook(http_session=mock_session).dispatch(rendered, config)

        url = mock_session.post.call_args_list[0].args[0]
        assert url.scheme == "https"
        assert url.host == "hooks.slack.com"
        assert url.port == 443
        assert url.path == "/services/T00/B00/XXXXsecret"

    @pytest.mark.asyncio
    async def test_shared_session_not_closed(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        mock_session = make_session(make_response(200), make_response(200))

        await HandlerSlackWebhook(http_session=mock_session).dispatch(rendered, config)

        mock_session.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_channel_names_normalized(
        self, rendered: ModelRenderedMessage, webhook_url: str
    ) -> None:
        config = ModelNotificationConfig(
            webhook_url=webhook_url, channels=("\\#ops", "general")
        )
        mock_session = make_session(make_response(200), make_response(200))

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config
        )

        assert [o.channel for o in outcomes] == ["#ops", "general"]

    @pytest.mark.asyncio
    async def test_partial_failure_is_independent(
        self,
        rendered: ModelRenderedMessage,
        config: ModelNotificationConfig,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """HTTP 500 on one channel does not affect the other."""
        mock_session = make_session(
            make_response(500, body="server_error", reason="Internal Server Error"),
            make_response(200),
        )

        with caplog.at_level(logging.INFO):
            outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
                rendered, config
            )

        ops, alerts = outcomes
        assert ops.channel == "ops"
        assert ops.succeeded is False
        assert ops.http_status == 500
        assert ops.error_detail == "500 Internal Server Error (body=server_error)"
        assert alerts.channel == "alerts"
        assert alerts.succeeded is True
        assert alerts.http_status == 200

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert [r.getMessage() for r in errors] == [
            "POST returned 500 Internal Server Error (body=server_error)"
        ]
        sent = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert "Notification sent to slack channel: alerts" in sent

    @pytest.mark.asyncio
    async def test_undecodable_error_body_stays_per_channel(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        """A body that fails to decode still yields outcomes for every channel."""
        broken = make_response(500, reason="Internal Server Error")
        broken.text = AsyncMock(
            side_effect=UnicodeDecodeError("utf-8", b"\xff\xfe", 0, 1, "invalid start byte")
        )
        mock_session = make_session(broken, make_response(200))

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config
        )

        assert [o.succeeded for o in outcomes] == [False, True]
        assert [o.channel for o in outcomes] == ["ops", "alerts"]
        assert (outcomes[0].error_detail or "").startswith("UnicodeDecodeError")

    @pytest.mark.asyncio
    async def test_error_body_is_read_leniently(
        self, rendered: ModelRenderedMessage, webhook_url: str
    ) -> None:
        config = ModelNotificationConfig(webhook_url=webhook_url, channels=("ops",))
        response = make_response(500, body="bad � bytes", reason="Internal Server Error")
        mock_session = make_session(response)

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config
        )

        response.text.assert_awaited_once_with(errors="replace")
        assert outcomes[0].http_status == 500
        assert outcomes[0].error_detail == (
            "500 Internal Server Error (body=bad � bytes)"
        )

    @pytest.mark.asyncio
    async def test_sensitive_error_body_is_redacted(
        self,
        rendered: ModelRenderedMessage,
        webhook_url: str,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Response bodies echoing credentials never reach logs or outcomes."""
        config = ModelNotificationConfig(webhook_url=webhook_url, channels=("ops",))
        mock_session = make_session(
            make_response(403, body=f"invalid_token for {webhook_url}", reason="Forbidden")
        )

        with caplog.at_level(logging.ERROR):
            outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
                rendered, config
            )

        detail = outcomes[0].error_detail or ""
        assert "XXXXsecret" not in detail
        assert "[REDACTED" in detail
        assert all("XXXXsecret" not in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_long_error_body_is_truncated(
        self, rendered: ModelRenderedMessage, webhook_url: str
    ) -> None:
        config = ModelNotificationConfig(webhook_url=webhook_url, channels=("ops",))
        mock_session = make_session(make_response(500, body="x" * 2000, reason="Error"))

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config
        )

        assert outcomes[0].error_detail == (
            "500 Error (body=" + "x" * 500 + "... [truncated])"
        )

    @pytest.mark.asyncio
    async def test_non_200_success_code_is_failure(
        self, rendered: ModelRenderedMessage, webhook_url: str
    ) -> None:
        """Only an exact 200 counts as delivered."""
        config = ModelNotificationConfig(webhook_url=webhook_url, channels=("ops",))
        mock_session = make_session(make_response(204, body="", reason="No Content"))

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config
        )

        assert outcomes[0].succeeded is False
        assert outcomes[0].http_status == 204

    @pytest.mark.asyncio
    async def test_timeout_is_recorded(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        mock_session = make_session(TimeoutError(), make_response(200))

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config
        )

        assert outcomes[0].succeeded is False
        assert outcomes[0].http_status is None
        assert outcomes[0].error_detail == "Request timeout"
        assert outcomes[1].succeeded is True

    @pytest.mark.asyncio
    async def test_connection_error_is_recorded(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        connection_error = aiohttp.ClientConnectorError(
            connection_key=MagicMock(), os_error=OSError("Connection refused")
        )
        mock_session = make_session(connection_error, connection_error)

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config
        )

        assert [o.succeeded for o in outcomes] == [False, False]
        assert all(o.http_status is None for o in outcomes)
        assert all(
            (o.error_detail or "").startswith("ClientConnectorError") for o in outcomes
        )

    @pytest.mark.asyncio
    async def test_client_error_with_url_is_sanitized(
        self, rendered: ModelRenderedMessage, webhook_url: str
    ) -> None:
        """Transport errors that embed the webhook URL are redacted."""
        config = ModelNotificationConfig(webhook_url=webhook_url, channels=("ops",))
        mock_session = make_session(aiohttp.ClientError(f"Cannot POST {webhook_url}"))

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config
        )

        detail = outcomes[0].error_detail or ""
        assert "XXXXsecret" not in detail
        assert "[REDACTED" in detail

    @pytest.mark.asyncio
    async def test_outcomes_share_correlation_id(
        self, rendered: ModelRenderedMessage, config: ModelNotificationConfig
    ) -> None:
        correlation_id = uuid4()
        mock_session = make_session(make_response(200), make_response(500))

        outcomes = await HandlerSlackWebhook(http_session=mock_session).dispatch(
            rendered, config, correlation_id=correlation_id
        )

        assert {o.correlation_id for o in outcomes} == {correlation_id}
        assert all(o.duration_ms >= 0 for o in outcomes)

    def test_repr_hides_session_details(self) -> None:
        assert repr(HandlerSlackWebhook()) == "<HandlerSlackWebhook shared_session=False>"
