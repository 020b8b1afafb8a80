"""Slash-command dispatch: list, show, add and help."""

import logging

from faq_bot.models.slack import DialogResult, SlackMessage, SlashCommand
from faq_bot.slack.dialog import open_faq_dialog
from faq_bot.store import find_by_tag, list_all

logger = logging.getLogger(__name__)

HELP_TAG = "help"
QUERY_FAILED = "Sorry, query failed"


def format_simple_message(text: str) -> dict:
    """Wrap text in the ephemeral response envelope."""
    return SlackMessage(text=text).model_dump()


async def list_faqs(command: str = "/faq") -> dict:
    """One ``*tag:* title`` line per tag, using the newest version's title."""
    result = await list_all()
    if not result.ok:
        return format_simple_message(QUERY_FAILED)

    titles: dict[str, str] = {}
    for entry in result.entries:
        titles.setdefault(entry.tag, entry.title)

    if not titles:
        return format_simple_message(f"No FAQs yet. Type *{command} add* to create one.")
    return format_simple_message("".join(f"*{tag}:* {title}\n" for tag, title in titles.items()))


async def show_faq(tag: str, command: str = "/faq") -> dict:
    """Render the current entry for a tag, or an apology pointing at list."""
    result = await find_by_tag(tag)
    if not result.ok:
        return format_simple_message(QUERY_FAILED)

    if not result.entries:
        return format_simple_message(
            f"Sorry, I didn't find a FAQ with tag *{tag}*\n"
            f"Type *{command} list* for all available FAQs"
        )
    current = result.entries[0]
    return format_simple_message(f"{current.title}\n{current.content}")


async def add_faq(trigger_id: str, title: str = "") -> dict:
    """Open the FAQ dialog and report how Slack responded."""
    result = await open_faq_dialog(trigger_id, title)
    if not isinstance(result, DialogResult):
        return format_simple_message("Sorry, I couldn't reach Slack to open the FAQ form")
    if not result.ok:
        return format_simple_message(f"Sorry, the FAQ form could not be opened: `{result.error}`")
    return format_simple_message("Opening the FAQ form...")


async def handle_command(cmd: SlashCommand) -> dict:
    """Dispatch on the first whitespace-separated token of the command text.

    Unknown tokens are looked up as tags; empty text shows the help entry.
    """
    tokens = cmd.text.split()
    action = tokens[0] if tokens else HELP_TAG
    logger.info("Handling %s %s from %s", cmd.command, action, cmd.user_name or "unknown")

    if action == "list":
        return await list_faqs(cmd.command)
    if action == "show":
        return await show_faq(tokens[1] if len(tokens) > 1 else HELP_TAG, cmd.command)
    if action == "add":
        return await add_faq(cmd.trigger_id, " ".join(tokens[1:]))
    return await show_faq(action, cmd.command)
