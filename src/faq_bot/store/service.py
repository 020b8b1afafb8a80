"""Entry Store: query, version computation and persistence of FAQ entries.

Reads never raise. Notion or transport failures are logged and come back as
an empty QueryResult carrying an error. Writes return PersistenceError
instead of raising so callers can render the failure to the user.

Versioning is read-max-then-write with no lock: two concurrent submissions
for the same tag can both persist the same version. The newest entry by
version still wins on read.
"""

import logging

import httpx
from notion_client import errors as notion_errors
from pydantic import ValidationError

from faq_bot.models.faq import FaqEntry, PersistenceError, QueryResult, SavedEntry
from faq_bot.store.client import get_data_source_id, get_notion_client
from faq_bot.store.properties import TAG, VERSION, build_properties, parse_page

logger = logging.getLogger(__name__)

_STORE_ERRORS = (
    notion_errors.HTTPResponseError,
    notion_errors.RequestTimeoutError,
    httpx.HTTPError,
    RuntimeError,
)

_NEWEST_FIRST = [{"property": VERSION, "direction": "descending"}]


async def _query(filter_: dict | None = None) -> QueryResult:
    """Run a data source query, following pagination, newest version first."""
    try:
        client = await get_notion_client()
        ds_id = await get_data_source_id()

        pages: list[dict] = []
        start_cursor: str | None = None
        while True:
            kwargs: dict = {"data_source_id": ds_id, "sorts": _NEWEST_FIRST}
            if filter_ is not None:
                kwargs["filter"] = filter_
            if start_cursor:
                kwargs["start_cursor"] = start_cursor

            response = await client.data_sources.query(**kwargs)
            pages.extend(response.get("results", []))

            if response.get("has_more"):
                start_cursor = response.get("next_cursor")
            else:
                break
    except _STORE_ERRORS as exc:
        logger.error("FAQ query failed (filter=%s): %s", filter_, exc, exc_info=True)
        return QueryResult(error=str(exc))

    entries: list[FaqEntry] = []
    for page in pages:
        try:
            entries.append(parse_page(page))
        except ValidationError as exc:
            logger.error("Skipping unreadable FAQ page %s: %s", page.get("id"), exc)

    # Stable sort keeps store order among equal versions
    entries.sort(key=lambda e: e.version or 0, reverse=True)
    return QueryResult(entries=entries)


async def list_all() -> QueryResult:
    """Return every stored entry, newest version first."""
    return await _query()


async def find_by_tag(tag: str) -> QueryResult:
    """Return all versions of the FAQ with exactly this tag, newest first."""
    return await _query({"property": TAG, "rich_text": {"equals": tag}})


def next_version(entries: list[FaqEntry]) -> int:
    """Version for a new entry given the existing versions of its tag.

    Entries stored without a version count as 0.
    """
    return max((e.version or 0 for e in entries), default=0) + 1


async def save_entry(entry: FaqEntry) -> SavedEntry | PersistenceError:
    """Persist a new entry as its own Notion page.

    Never updates an existing page; the store assigns the identifier.
    Duplicate tag/version pairs are not checked.
    """
    try:
        client = await get_notion_client()
        ds_id = await get_data_source_id()
        created = await client.pages.create(
            parent={"type": "data_source_id", "data_source_id": ds_id},
            properties=build_properties(entry),
        )
    except _STORE_ERRORS as exc:
        logger.error(
            "Failed to save FAQ %s v%d: %s", entry.tag, entry.version, exc, exc_info=True
        )
        return PersistenceError(detail=str(exc))

    logger.info("Saved FAQ %s v%d (%s)", entry.tag, entry.version, created["id"])
    return SavedEntry(entry_id=created["id"], tag=entry.tag, version=entry.version)
