"""Data models for FAQ entries and Slack payloads."""

from faq_bot.models.faq import FaqEntry, PersistenceError, QueryResult, SavedEntry
from faq_bot.models.slack import (
    DialogResult,
    DialogSubmission,
    FaqSubmission,
    HealthProbe,
    InboundRequest,
    SlackChannel,
    SlackMessage,
    SlackUser,
    SlashCommand,
    TransportError,
)

__all__ = [
    "FaqEntry",
    "PersistenceError",
    "QueryResult",
    "SavedEntry",
    "DialogResult",
    "DialogSubmission",
    "FaqSubmission",
    "HealthProbe",
    "InboundRequest",
    "SlackChannel",
    "SlackMessage",
    "SlackUser",
    "SlashCommand",
    "TransportError",
]
