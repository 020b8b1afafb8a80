"""Pure functions mapping FaqEntry to and from Notion page properties.

Long text goes through _split_rich_text to respect the 2000-character
rich_text limit; reading concatenates the chunks back together.
"""

from datetime import datetime, timezone

from faq_bot.models.faq import FaqEntry

TAG = "Tag"
VERSION = "Version"


def _split_rich_text(text: str, limit: int = 2000) -> list[dict]:
    """Split text into multiple rich_text objects respecting Notion's 2000-char limit."""
    if not text:
        return [{"type": "text", "text": {"content": ""}}]
    chunks = []
    for i in range(0, len(text), limit):
        chunks.append({"type": "text", "text": {"content": text[i : i + limit]}})
    return chunks


def _join_rich_text(items: list[dict]) -> str:
    return "".join(item.get("plain_text", "") for item in items)


def build_properties(entry: FaqEntry) -> dict:
    """Map a FaqEntry to a Notion API property dict for pages.create()."""
    return {
        "Title": {"title": _split_rich_text(entry.title)},
        TAG: {"rich_text": _split_rich_text(entry.tag)},
        "Content": {"rich_text": _split_rich_text(entry.content)},
        VERSION: {"number": entry.version},
        "Author": {"rich_text": _split_rich_text(entry.author)},
        "Channel": {"rich_text": _split_rich_text(entry.channel)},
        "Updated": {"date": {"start": entry.updated.isoformat()}},
    }


def parse_page(page: dict) -> FaqEntry:
    """Build a FaqEntry from a Notion page object.

    Missing or empty properties fall back to blanks; a missing version stays
    None and a missing date falls back to the page's created_time.
    """
    props = page.get("properties", {})

    updated_prop = props.get("Updated", {}).get("date") or {}
    updated_raw = updated_prop.get("start") or page.get("created_time")
    if updated_raw:
        updated = datetime.fromisoformat(updated_raw.replace("Z", "+00:00"))
    else:
        updated = datetime.now(timezone.utc)

    return FaqEntry(
        entry_id=page.get("id"),
        tag=_join_rich_text(props.get(TAG, {}).get("rich_text", [])),
        title=_join_rich_text(props.get("Title", {}).get("title", [])),
        content=_join_rich_text(props.get("Content", {}).get("rich_text", [])),
        version=props.get(VERSION, {}).get("number"),
        author=_join_rich_text(props.get("Author", {}).get("rich_text", [])),
        channel=_join_rich_text(props.get("Channel", {}).get("rich_text", [])),
        updated=updated,
    )
