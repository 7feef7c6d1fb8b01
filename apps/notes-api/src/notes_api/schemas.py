from pydantic import BaseModel, Field


class NoteCreateRequest(BaseModel):
    note_id: str = Field(min_length=1, max_length=64)
    title: str = Field(min_length=1, max_length=200)
    body: str = Field(default="", max_length=10_000)
