"""Slack slash-command and dialog endpoint."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from faq_bot.models.slack import DialogSubmission, HealthProbe, InboundRequest
from faq_bot.slack.commands import handle_command
from faq_bot.slack.gate import verify_webhook
from faq_bot.slack.intake import handle_dialog_submission

router = APIRouter(prefix="", tags=["slack"])

# Every verb is routed so the gate answers health probes and 405s itself
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/slack/faq", methods=_ALL_METHODS)
async def slack_faq(inbound: InboundRequest = Depends(verify_webhook)) -> Response:
    """Receive /faq slash commands and FAQ dialog submissions."""
    if isinstance(inbound, HealthProbe):
        return JSONResponse({"status": "ready"})

    if isinstance(inbound, DialogSubmission):
        errors = await handle_dialog_submission(inbound)
        if errors is not None:
            return JSONResponse(errors)
        # Slack closes the dialog on an empty 200
        return Response(status_code=200)

    return JSONResponse(await handle_command(inbound))
