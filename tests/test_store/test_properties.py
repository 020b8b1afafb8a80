"""Tests for FaqEntry <-> Notion property mapping."""

from datetime import datetime, timezone

from faq_bot.models.faq import FaqEntry
from faq_bot.store.properties import build_properties, parse_page

UPDATED = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def _entry(**overrides) -> FaqEntry:
    defaults = {
        "tag": "vpn",
        "title": "VPN access",
        "content": "Use the portal",
        "version": 2,
        "author": "alice",
        "channel": "general",
        "updated": UPDATED,
    }
    defaults.update(overrides)
    return FaqEntry(**defaults)


def _rich(text: str) -> list[dict]:
    return [{"type": "text", "text": {"content": text}, "plain_text": text}]


def test_build_properties_maps_all_fields():
    props = build_properties(_entry())
    assert props["Title"]["title"][0]["text"]["content"] == "VPN access"
    assert props["Tag"]["rich_text"][0]["text"]["content"] == "vpn"
    assert props["Content"]["rich_text"][0]["text"]["content"] == "Use the portal"
    assert props["Version"] == {"number": 2}
    assert props["Author"]["rich_text"][0]["text"]["content"] == "alice"
    assert props["Channel"]["rich_text"][0]["text"]["content"] == "general"
    assert props["Updated"] == {"date": {"start": UPDATED.isoformat()}}


def test_build_properties_splits_long_content():
    """Content over 2000 characters becomes several rich_text chunks."""
    props = build_properties(_entry(content="x" * 4500))
    chunks = props["Content"]["rich_text"]
    assert [len(c["text"]["content"]) for c in chunks] == [2000, 2000, 500]


def test_build_properties_empty_author():
    props = build_properties(_entry(author=""))
    assert props["Author"]["rich_text"] == [{"type": "text", "text": {"content": ""}}]


def test_parse_page_reads_all_fields():
    page = {
        "id": "page-1",
        "properties": {
            "Title": {"title": _rich("VPN access")},
            "Tag": {"rich_text": _rich("vpn")},
            "Content": {"rich_text": _rich("Use ") + _rich("the portal")},
            "Version": {"number": 3},
            "Author": {"rich_text": _rich("alice")},
            "Channel": {"rich_text": _rich("general")},
            "Updated": {"date": {"start": "2026-10-01T12:00:00+00:00"}},
        },
    }
    entry = parse_page(page)
    assert entry.entry_id == "page-1"
    assert entry.tag == "vpn"
    assert entry.content == "Use the portal"
    assert entry.version == 3
    assert entry.updated == UPDATED


def test_parse_page_missing_properties_fall_back():
    """Missing version stays None, missing date falls back to created_time."""
    entry = parse_page(
        {
            "id": "page-2",
            "created_time": "2026-10-01T12:00:00.000Z",
            "properties": {"Tag": {"rich_text": _rich("help")}, "Version": {"number": None}},
        }
    )
    assert entry.tag == "help"
    assert entry.title == ""
    assert entry.version is None
    assert entry.updated == UPDATED
