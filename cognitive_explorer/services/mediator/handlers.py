"""
Mediator handlers.

- ExecuteCognitiveServicesHandler: performs the HTTP call described by a
  request descriptor against a configured Cognitive Service
- Profile handlers: read and write the profile store
"""

import logging
from contextlib import AbstractContextManager
from typing import Callable, Optional

import httpx
from pydantic import ValidationError
from sqlmodel import Session

from cognitive_explorer.database import get_session
from cognitive_explorer.models import ErrorResponse, Profile
from cognitive_explorer.services.http_client import create_http_client
from cognitive_explorer.services.mediator.base import BaseHandler
from cognitive_explorer.services.mediator.commands import (
    DeleteProfileCommand,
    ExecuteCognitiveServicesCommand,
    GetCurrentProfileQuery,
    ListProfilesQuery,
    SaveProfileCommand,
    SelectProfileCommand,
)
from cognitive_explorer.services.profile_store import ProfileStore

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

SessionFactory = Callable[[], AbstractContextManager[Session]]
ClientFactory = Callable[[], httpx.AsyncClient]


class CognitiveServicesHttpError(Exception):
    """
    Raised when a Cognitive Service answers with a non-success status.

    Carries the status code, the raw response body and, when the body is an
    API error envelope, the parsed payload.
    """

    def __init__(self, method: str, url: str, status_code: int, reason: str, body: str):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Call failed with status code {status_code} ({reason}): {method} {url}")

    def error_payload(self) -> Optional[ErrorResponse]:
        """Parses the response body as an API error envelope, or returns None."""
        if not self.body:
            return None
        try:
            return ErrorResponse.model_validate_json(self.body)
        except ValidationError:
            return None


class ExecuteCognitiveServicesHandler(BaseHandler):
    """Sends a request descriptor to the service and returns the raw body."""

    def __init__(self, client_factory: ClientFactory = create_http_client):
        self._client_factory = client_factory

    async def handle(self, message: ExecuteCognitiveServicesCommand) -> str:
        request = message.request
        config = message.config
        url = config.build_url(request.relative_path)

        headers = {SUBSCRIPTION_KEY_HEADER: config.key, **request.headers}
        if request.content_type:
            headers["Content-Type"] = request.content_type

        logger.info(f"{request.http_method} {request.path_and_query}")

        async with self._client_factory() as client:
            response = await client.request(
                request.http_method,
                url,
                params=request.queries or None,
                content=request.body.encode("utf-8") if request.body is not None else None,
                headers=headers,
            )

        if response.is_error:
            logger.warning(f"{request.http_method} {request.relative_path} failed with status {response.status_code}")
            raise CognitiveServicesHttpError(
                method=request.http_method,
                url=url,
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )

        return response.text


class _ProfileHandler(BaseHandler):
    """Base for handlers that open a profile store session per message."""

    def __init__(self, session_factory: SessionFactory = get_session):
        self._session_factory = session_factory


class GetCurrentProfileHandler(_ProfileHandler):
    async def handle(self, message: GetCurrentProfileQuery) -> Optional[Profile]:
        with self._session_factory() as session:
            return ProfileStore(session).get_current()


class ListProfilesHandler(_ProfileHandler):
    async def handle(self, message: ListProfilesQuery) -> list[Profile]:
        with self._session_factory() as session:
            return ProfileStore(session).list_profiles()


class SaveProfileHandler(_ProfileHandler):
    async def handle(self, message: SaveProfileCommand) -> Profile:
        with self._session_factory() as session:
            return ProfileStore(session).save(message.profile)


class SelectProfileHandler(_ProfileHandler):
    async def handle(self, message: SelectProfileCommand) -> Profile:
        with self._session_factory() as session:
            return ProfileStore(session).select(message.name)


class DeleteProfileHandler(_ProfileHandler):
    async def handle(self, message: DeleteProfileCommand) -> None:
        with self._session_factory() as session:
            ProfileStore(session).delete(message.name)
