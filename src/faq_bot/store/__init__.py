"""Entry Store: FAQ persistence on a Notion database."""

from faq_bot.store.client import get_data_source_id, get_notion_client, reset_client
from faq_bot.store.properties import build_properties, parse_page
from faq_bot.store.service import find_by_tag, list_all, next_version, save_entry

__all__ = [
    "build_properties",
    "find_by_tag",
    "get_data_source_id",
    "get_notion_client",
    "list_all",
    "next_version",
    "parse_page",
    "reset_client",
    "save_entry",
]
