"""
FastAPI backend: REST API over the JSON contact store.
Run with uvicorn: uvicorn api.main:app --reload --port 5000
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from contactbook.config import Settings, load_env

load_env()

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from contactbook.application import ContactNotFound, ContactService, WriteFailed
from contactbook.domain import Contact
from contactbook.infrastructure import JsonFileContactRepository

settings = Settings.from_env()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level, logging.INFO),
)
logger = logging.getLogger(__name__)


def build_service(s: Settings) -> ContactService:
    repo = JsonFileContactRepository(s.contacts_file)
    return ContactService(repo, serialize_writes=s.serialize_writes)


def get_service(app: FastAPI) -> ContactService:
    if getattr(app.state, "service", None) is None:
        app.state.service = build_service(settings)
    return app.state.service


class ContactBody(BaseModel):
    """Contact as sent by clients. Nothing is validated; unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Any = None
    phoneNumber: Any = None
    email: Any = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


def _to_response(result: Contact | ContactNotFound | WriteFailed) -> JSONResponse:
    if isinstance(result, ContactNotFound):
        return _error(404, result.message)
    if isinstance(result, WriteFailed):
        return _error(500, result.message)
    return JSONResponse(content=result.to_dict())


def create_app(service: ContactService | None = None) -> FastAPI:
    """Build the app. Without a service, one is built from settings at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "service", None) is None:
            app.state.service = build_service(settings)
        logger.info("Contacts API ready (store: %s)", settings.contacts_file)
        yield

    app = FastAPI(title="Contactbook API", lifespan=lifespan)
    app.state.service = service
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- REST: health ---

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # --- REST: contacts ---

    @app.get("/api/contacts")
    def list_contacts(request: Request):
        contacts = get_service(request.app).list_contacts()
        return [c.to_dict() for c in contacts]

    @app.get("/api/contacts/{contact_id:path}")
    def get_contact(contact_id: str, request: Request):
        return _to_response(get_service(request.app).get_contact(contact_id))

    @app.post("/api/contacts")
    def create_contact(body: ContactBody, request: Request):
        data = body.model_dump(exclude_unset=True)
        return _to_response(get_service(request.app).create_contact(data))

    @app.put("/api/contacts/{contact_id:path}")
    def update_contact(contact_id: str, body: ContactBody, request: Request):
        patch = body.model_dump(exclude_unset=True)
        return _to_response(get_service(request.app).update_contact(contact_id, patch))

    @app.delete("/api/contacts/{contact_id:path}")
    def delete_contact(contact_id: str, request: Request):
        return _to_response(get_service(request.app).delete_contact(contact_id))

    return app


app = create_app()


def main() -> None:
    logger.info("Server is running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
