"""Webhook gate: method check, health probes and verification-token auth.

Runs as a FastAPI dependency, so nothing downstream executes (no store
access, no Slack calls) unless the request is an authenticated POST.
"""

import json
import logging
from urllib.parse import parse_qsl

from fastapi import HTTPException, Request
from pydantic import ValidationError

from faq_bot.config import get_settings
from faq_bot.errors import MethodNotAllowed, Unauthorized
from faq_bot.models.slack import DialogSubmission, HealthProbe, InboundRequest, SlashCommand

logger = logging.getLogger(__name__)


async def _read_body(request: Request) -> dict:
    """Parse a JSON or form-encoded body. Unparseable bodies read as empty."""
    raw = await request.body()
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            body = json.loads(raw or b"{}")
        else:
            body = dict(parse_qsl(raw.decode("utf-8"), keep_blank_values=True))
    except (ValueError, UnicodeDecodeError):
        logger.warning("Could not parse %s request body", content_type or "untyped")
        return {}
    return body if isinstance(body, dict) else {}


def _decode_payload(body: dict) -> dict | None:
    """Return the decoded dialog payload, or None if the body is a slash command."""
    if "payload" not in body:
        return None
    payload = body["payload"]
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError:
            return {}
    return payload if isinstance(payload, dict) else {}


def verify_token(token: object) -> None:
    """Raise Unauthorized unless token exactly matches the configured secret."""
    expected = get_settings().slack_verification_token
    if not expected or token != expected:
        logger.warning("Rejected request with invalid verification token")
        raise Unauthorized()


async def verify_webhook(request: Request) -> InboundRequest:
    """Authenticate the request and discriminate its payload kind.

    - non-POST with the health-check User-Agent -> HealthProbe (no auth)
    - any other non-POST -> MethodNotAllowed (405)
    - bad or missing token -> Unauthorized (401)
    - body with ``payload`` -> DialogSubmission, else SlashCommand
    """
    settings = get_settings()
    if request.method != "POST":
        if request.headers.get("user-agent", "") == settings.health_check_user_agent:
            return HealthProbe()
        raise MethodNotAllowed()

    body = await _read_body(request)
    payload = _decode_payload(body)
    source = body if payload is None else payload

    verify_token(source.get("token"))

    try:
        if payload is None:
            return SlashCommand.model_validate(source)
        return DialogSubmission.model_validate(source)
    except ValidationError as exc:
        logger.warning("Malformed Slack request: %s", exc)
        raise HTTPException(status_code=400, detail="Malformed request body")
