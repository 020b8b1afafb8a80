"""Inbound Slack request models and Slack-facing response types.

Both request kinds arrive on the same endpoint. The gate discriminates them
before any business logic runs: a body carrying ``payload`` is a dialog
submission, anything else is a slash command.
"""

from typing import Literal

from pydantic import BaseModel


class HealthProbe(BaseModel):
    """A non-POST readiness probe from the load balancer."""

    kind: Literal["health_probe"] = "health_probe"


class SlashCommand(BaseModel):
    """A ``/faq`` slash-command invocation."""

    kind: Literal["slash_command"] = "slash_command"
    token: str
    text: str = ""
    trigger_id: str = ""
    command: str = "/faq"
    user_name: str = ""
    channel_name: str = ""


class FaqSubmission(BaseModel):
    """Field values entered in the FAQ dialog."""

    tag: str = ""
    title: str = ""
    content: str = ""


class SlackUser(BaseModel):
    id: str = ""
    name: str = ""


class SlackChannel(BaseModel):
    id: str = ""
    name: str = ""


class DialogSubmission(BaseModel):
    """An interactive dialog callback (the decoded ``payload`` field)."""

    kind: Literal["dialog_submission"] = "dialog_submission"
    token: str
    type: str = ""
    callback_id: str = ""
    submission: FaqSubmission = FaqSubmission()
    user: SlackUser = SlackUser()
    channel: SlackChannel = SlackChannel()


InboundRequest = HealthProbe | SlashCommand | DialogSubmission


class SlackMessage(BaseModel):
    """Ephemeral response envelope returned for every slash command."""

    response_type: str = "ephemeral"
    text: str
    attachments: list[dict] = []


class DialogResult(BaseModel):
    """Outcome of a ``dialog.open`` call that reached Slack."""

    ok: bool
    error: str | None = None  # Slack error code when ok is False


class TransportError(BaseModel):
    """Returned (not raised) when Slack's API could not be reached."""

    detail: str
