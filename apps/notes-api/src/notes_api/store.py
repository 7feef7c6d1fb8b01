from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class NoteNotFoundError(LookupError):
    """Raised when a note id is unknown."""


class NoteConflictError(Exception):
    """Raised when a note id is already taken."""


@dataclass(frozen=True)
class Note:
    note_id: str
    title: str
    body: str
    created_by: str
    created_at: str


class InMemoryNoteStore:
    def __init__(self) -> None:
        self._notes: dict[str, Note] = {}

    async def list_notes(self) -> list[Note]:
        return list(self._notes.values())

    async def get_note(self, note_id: str) -> Note:
        note = self._notes.get(note_id)
        if note is None:
            raise NoteNotFoundError(f"note not found: {note_id}")
        return note

    async def create_note(self, note_id: str, title: str, body: str, created_by: str) -> Note:
        if note_id in self._notes:
            raise NoteConflictError(f"note already exists: {note_id}")
        note = Note(
            note_id=note_id,
            title=title,
            body=body,
            created_by=created_by,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._notes[note_id] = note
        logger.info("note_created", extra={"component": "notes_api", "note_id": note_id})
        return note

    async def delete_note(self, note_id: str) -> None:
        if self._notes.pop(note_id, None) is None:
            raise NoteNotFoundError(f"note not found: {note_id}")
        logger.info("note_deleted", extra={"component": "notes_api", "note_id": note_id})
