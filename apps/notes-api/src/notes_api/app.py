from __future__ import annotations

from dataclasses import asdict

from devkit.config import load_settings
from devkit.observability import configure_logging, configure_otel
from fastapi import Depends, FastAPI, Header
from fastapi.responses import JSONResponse
from response_kit import ApiError, get_response_helper, install_exception_handlers, to_json_response

from notes_api.schemas import NoteCreateRequest
from notes_api.store import InMemoryNoteStore, Note, NoteConflictError, NoteNotFoundError

READONLY_ROLE = "readonly"


def _note_payload(note: Note) -> dict[str, str]:
    return asdict(note)


def create_app(store: InMemoryNoteStore | None = None) -> FastAPI:
    settings = load_settings("notes-api")
    configure_logging(settings.LOG_LEVEL)
    if settings.OTEL_ENABLED:
        configure_otel(service_name=settings.SERVICE_NAME)

    app = FastAPI(title="Notes API", version="0.1.0")
    app.state.store = store if store is not None else InMemoryNoteStore()
    app.state.responses = get_response_helper()
    install_exception_handlers(
        app,
        helper=app.state.responses,
        expose_internal_errors=settings.EXPOSE_INTERNAL_ERRORS,
    )
    responses = app.state.responses

    async def resolve_client(
        x_client_id: str | None = Header(default=None),
        x_role: str | None = Header(default=None),
    ) -> dict[str, str]:
        if not x_client_id:
            raise ApiError.unauthorized("missing client id")
        return {"client_id": x_client_id, "role": (x_role or "writer").lower()}

    async def require_writer(client: dict[str, str] = Depends(resolve_client)) -> dict[str, str]:
        if client["role"] == READONLY_ROLE:
            raise ApiError.forbidden("write access required")
        return client

    @app.get("/healthz")
    async def healthz() -> JSONResponse:
        return to_json_response(responses.ok({"status": "ok"}))

    @app.get("/readyz")
    async def readyz() -> JSONResponse:
        return to_json_response(responses.ok({"status": "ready"}))

    @app.get("/v1/notes")
    async def list_notes() -> JSONResponse:
        notes = await app.state.store.list_notes()
        return to_json_response(
            responses.ok({"items": [_note_payload(note) for note in notes]}, count=len(notes)),
        )

    @app.post("/v1/notes")
    async def create_note(
        body: NoteCreateRequest,
        client: dict[str, str] = Depends(require_writer),
    ) -> JSONResponse:
        try:
            note = await app.state.store.create_note(
                note_id=body.note_id,
                title=body.title,
                body=body.body,
                created_by=client["client_id"],
            )
        except NoteConflictError as exc:
            raise ApiError.conflict(str(exc)) from exc
        return to_json_response(responses.created(_note_payload(note)))

    @app.get("/v1/notes/{note_id}")
    async def get_note(note_id: str) -> JSONResponse:
        try:
            note = await app.state.store.get_note(note_id)
        except NoteNotFoundError as exc:
            raise ApiError.not_found(str(exc)) from exc
        return to_json_response(responses.ok(_note_payload(note)))

    @app.delete("/v1/notes/{note_id}", dependencies=[Depends(require_writer)])
    async def delete_note(note_id: str) -> JSONResponse:
        try:
            await app.state.store.delete_note(note_id)
        except NoteNotFoundError as exc:
            raise ApiError.not_found(str(exc)) from exc
        return to_json_response(responses.ok())

    return app


app = create_app()
