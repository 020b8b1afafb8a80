"""Shared test fixtures."""

import copy
import uuid
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from faq_bot.app import app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


def _as_read(properties: dict) -> dict:
    """Turn pages.create property payloads into the shape Notion returns on read."""
    read = copy.deepcopy(properties)
    for prop in read.values():
        for key in ("title", "rich_text"):
            for item in prop.get(key, []):
                item["plain_text"] = item["text"]["content"]
    return read


class FakeNotion:
    """In-memory stand-in for the Notion data source holding FAQ pages."""

    def __init__(self) -> None:
        self.pages: list[dict] = []
        self.data_sources = AsyncMock()
        self.data_sources.query.side_effect = self._query
        self.pages_api = AsyncMock()
        self.pages_api.create.side_effect = self._create

    async def _query(self, data_source_id, filter=None, sorts=None, start_cursor=None):
        results = self.pages
        if filter is not None:
            wanted = filter["rich_text"]["equals"]
            results = [
                p for p in results
                if "".join(i["plain_text"] for i in p["properties"]["Tag"]["rich_text"]) == wanted
            ]
        results = sorted(
            results, key=lambda p: p["properties"]["Version"]["number"], reverse=True
        )
        return {"results": results, "has_more": False, "next_cursor": None}

    async def _create(self, parent, properties):
        page_id = str(uuid.uuid4())
        self.pages.append({"id": page_id, "properties": _as_read(properties)})
        return {"id": page_id, "url": f"https://notion.so/{page_id}"}


@pytest.fixture
def fake_notion():
    """Patch the Entry Store onto an in-memory FakeNotion."""
    fake = FakeNotion()
    notion = AsyncMock()
    notion.data_sources = fake.data_sources
    notion.pages = fake.pages_api
    with (
        patch("faq_bot.store.service.get_notion_client", new_callable=AsyncMock) as m_client,
        patch("faq_bot.store.service.get_data_source_id", new_callable=AsyncMock) as m_ds,
    ):
        m_client.return_value = notion
        m_ds.return_value = "ds-faq"
        yield fake
