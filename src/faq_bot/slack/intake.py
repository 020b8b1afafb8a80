"""Dialog submission intake: resolve the next version and persist the entry."""

import logging
from datetime import datetime, timezone

from faq_bot.errors import MethodNotAllowed
from faq_bot.models.faq import FaqEntry, PersistenceError
from faq_bot.models.slack import DialogSubmission
from faq_bot.store import find_by_tag, next_version, save_entry

logger = logging.getLogger(__name__)

DIALOG_SUBMISSION = "dialog_submission"


def field_error(message: str, field: str = "content") -> dict:
    """Slack dialog error body; Slack shows it inline and keeps the user's input."""
    return {"errors": [{"name": field, "error": message}]}


async def handle_dialog_submission(submission: DialogSubmission) -> dict | None:
    """Store a submitted FAQ as a new entry.

    A tag that already exists gets max(version) + 1, a new tag version 1.
    Earlier versions are left untouched. Returns None on success or a
    field error body when the store could not be read or written.
    """
    if submission.type != DIALOG_SUBMISSION:
        raise MethodNotAllowed(f"Unsupported interaction type: {submission.type}")

    values = submission.submission
    tag = values.tag.strip()
    # show looks tags up by a single whitespace-separated token
    if not tag or len(tag.split()) > 1:
        return field_error("Tags must be a single word", field="tag")

    existing = await find_by_tag(tag)
    if not existing.ok:
        return field_error(f"Could not check existing versions of {tag}")

    entry = FaqEntry(
        tag=tag,
        title=values.title,
        content=values.content,
        version=next_version(existing.entries),
        author=submission.user.name,
        channel=submission.channel.name,
        updated=datetime.now(timezone.utc),
    )

    result = await save_entry(entry)
    if isinstance(result, PersistenceError):
        return field_error(f"Failed to save FAQ: {result.detail}")

    logger.info(
        "FAQ %s v%d submitted by %s in %s",
        entry.tag,
        entry.version,
        entry.author,
        entry.channel,
    )
    return None
