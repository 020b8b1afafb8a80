"""The "Create a new FAQ" dialog and the dialog.open call that shows it."""

import asyncio
import logging

import aiohttp
from slack_sdk.errors import SlackApiError

from faq_bot.models.slack import DialogResult, TransportError
from faq_bot.slack.client import get_slack_client

logger = logging.getLogger(__name__)

CALLBACK_ID = "create-faq"


def build_faq_dialog(title: str = "") -> dict:
    """Return the dialog specification with the title field pre-filled."""
    return {
        "title": "Create a new FAQ",
        "callback_id": CALLBACK_ID,
        "submit_label": "Submit",
        "elements": [
            {
                "label": "Title",
                "type": "text",
                "name": "title",
                "value": title,
                "hint": "One-line description of FAQ contents",
            },
            {
                "label": "Tag",
                "type": "text",
                "name": "tag",
                "hint": "Index word for this FAQ",
            },
            {
                "label": "Content",
                "type": "textarea",
                "name": "content",
                "hint": "Write the content of the FAQ here.  You can use Slack formatting",
            },
        ],
    }


async def open_faq_dialog(trigger_id: str, title: str = "") -> DialogResult | TransportError:
    """Ask Slack to open the FAQ dialog for the user who ran the command.

    Slack-side rejections (expired trigger, bad token) come back as
    DialogResult(ok=False) with Slack's error code. Network failures come
    back as TransportError. Nothing is raised.
    """
    try:
        client = await get_slack_client()
        await client.dialog_open(dialog=build_faq_dialog(title), trigger_id=trigger_id)
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        logger.warning("dialog.open rejected by Slack: %s", error_code or "unknown_error")
        return DialogResult(ok=False, error=error_code or "unknown_error")
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        logger.error("dialog.open request failed: %s", exc, exc_info=True)
        return TransportError(detail=str(exc) or type(exc).__name__)

    return DialogResult(ok=True)
