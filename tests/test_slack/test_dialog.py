"""Tests for the FAQ dialog specification and dialog.open handling."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest
from slack_sdk.errors import SlackApiError

from faq_bot.models.slack import DialogResult, TransportError
from faq_bot.slack.dialog import build_faq_dialog, open_faq_dialog


def _make_slack_api_error(error_code: str) -> SlackApiError:
    """Build a SlackApiError with a mock response carrying the given error code."""
    resp = MagicMock()
    resp.get = MagicMock(
        side_effect=lambda key, default="": error_code if key == "error" else default,
    )
    return SlackApiError(message=f"slack error: {error_code}", response=resp)


@pytest.fixture()
def mock_client():
    """Patch get_slack_client to return an AsyncMock Slack client."""
    client = AsyncMock()
    with patch("faq_bot.slack.dialog.get_slack_client", new_callable=AsyncMock) as m:
        m.return_value = client
        yield client


def test_build_faq_dialog_fields():
    """Title, tag and content elements in that order; title is pre-filled."""
    dialog = build_faq_dialog("VPN access")
    assert dialog["title"] == "Create a new FAQ"
    assert dialog["callback_id"] == "create-faq"
    assert [e["name"] for e in dialog["elements"]] == ["title", "tag", "content"]
    assert dialog["elements"][0]["value"] == "VPN access"
    assert dialog["elements"][2]["type"] == "textarea"
    assert "value" not in dialog["elements"][1]


async def test_open_faq_dialog_success(mock_client: AsyncMock):
    result = await open_faq_dialog("trigger-1", "VPN access")

    assert result == DialogResult(ok=True)
    kwargs = mock_client.dialog_open.call_args.kwargs
    assert kwargs["trigger_id"] == "trigger-1"
    assert kwargs["dialog"]["elements"][0]["value"] == "VPN access"


async def test_open_faq_dialog_slack_error(mock_client: AsyncMock):
    """Slack's error code is reported back, not raised."""
    mock_client.dialog_open.side_effect = _make_slack_api_error("expired_trigger_id")

    result = await open_faq_dialog("trigger-1")

    assert result == DialogResult(ok=False, error="expired_trigger_id")


@pytest.mark.parametrize(
    "exc", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()]
)
async def test_open_faq_dialog_transport_error(mock_client: AsyncMock, exc: Exception):
    mock_client.dialog_open.side_effect = exc

    result = await open_faq_dialog("trigger-1")

    assert isinstance(result, TransportError)
    assert result.detail
