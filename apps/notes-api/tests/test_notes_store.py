import asyncio

import pytest

from notes_api.store import InMemoryNoteStore, NoteConflictError, NoteNotFoundError


def test_store_create_get_delete() -> None:
    async def scenario() -> None:
        store = InMemoryNoteStore()
        created = await store.create_note("n-1", "Title", "Body", created_by="client-1")
        assert await store.get_note("n-1") == created
        await store.delete_note("n-1")
        with pytest.raises(NoteNotFoundError):
            await store.get_note("n-1")

    asyncio.run(scenario())


def test_store_rejects_duplicate_ids() -> None:
    async def scenario() -> None:
        store = InMemoryNoteStore()
        await store.create_note("n-1", "Title", "", created_by="client-1")
        with pytest.raises(NoteConflictError):
            await store.create_note("n-1", "Other", "", created_by="client-2")

    asyncio.run(scenario())
