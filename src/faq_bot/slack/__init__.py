"""Slack ingress: webhook gate, slash commands, dialog intake."""

from faq_bot.slack.client import get_slack_client, reset_client
from faq_bot.slack.commands import format_simple_message, handle_command
from faq_bot.slack.dialog import build_faq_dialog, open_faq_dialog
from faq_bot.slack.intake import handle_dialog_submission
from faq_bot.slack.router import router

__all__ = [
    "build_faq_dialog",
    "format_simple_message",
    "get_slack_client",
    "handle_command",
    "handle_dialog_submission",
    "open_faq_dialog",
    "reset_client",
    "router",
]
