"""FAQ entry model and Entry Store result types."""

from datetime import datetime

from pydantic import BaseModel, Field


class FaqEntry(BaseModel):
    """One immutable version of a FAQ.

    Several entries may share a tag; the one with the highest version is the
    current entry for that tag.
    """

    tag: str
    title: str
    content: str
    version: int | None = Field(default=None, ge=1)  # None only when read back unset
    author: str = ""
    channel: str = ""
    updated: datetime
    entry_id: str | None = None  # Store-generated, absent until persisted


class QueryResult(BaseModel):
    """Entries returned by a store read, newest version first.

    A failed read leaves ``entries`` empty and sets ``error``.
    """

    entries: list[FaqEntry] = []
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SavedEntry(BaseModel):
    """Returned after an entry is persisted."""

    entry_id: str
    tag: str
    version: int


class PersistenceError(BaseModel):
    """Returned (not raised) when the store rejects a write."""

    detail: str
