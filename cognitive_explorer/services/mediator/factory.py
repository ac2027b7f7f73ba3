"""
Mediator Factory.

Builds a mediator with every command and query handler registered.
A process-wide instance is cached for the UI and the REST API.
"""

import logging
from typing import Optional

from cognitive_explorer.database import get_session
from cognitive_explorer.services.http_client import create_http_client
from cognitive_explorer.services.mediator.base import Mediator
from cognitive_explorer.services.mediator.commands import (
    DeleteProfileCommand,
    ExecuteCognitiveServicesCommand,
    GetCurrentProfileQuery,
    ListProfilesQuery,
    SaveProfileCommand,
    SelectProfileCommand,
)
from cognitive_explorer.services.mediator.handlers import (
    DeleteProfileHandler,
    ExecuteCognitiveServicesHandler,
    GetCurrentProfileHandler,
    ListProfilesHandler,
    SaveProfileHandler,
    SelectProfileHandler,
)

logger = logging.getLogger(__name__)


# Message type -> handler class for the profile store handlers
_PROFILE_HANDLERS = {
    GetCurrentProfileQuery: GetCurrentProfileHandler,
    ListProfilesQuery: ListProfilesHandler,
    SaveProfileCommand: SaveProfileHandler,
    SelectProfileCommand: SelectProfileHandler,
    DeleteProfileCommand: DeleteProfileHandler,
}


def build_mediator(session_factory=get_session, client_factory=create_http_client) -> Mediator:
    """
    Creates a mediator with all handlers registered.

    Args:
        session_factory: Context manager factory yielding profile store sessions
        client_factory: Factory for the httpx.AsyncClient used per call
    """
    mediator = Mediator()
    mediator.register(
        ExecuteCognitiveServicesCommand,
        ExecuteCognitiveServicesHandler(client_factory=client_factory),
    )
    for message_type, handler_cls in _PROFILE_HANDLERS.items():
        mediator.register(message_type, handler_cls(session_factory=session_factory))
    return mediator


# Singleton cache
_mediator_instance: Optional[Mediator] = None


def get_mediator() -> Mediator:
    """Returns the process-wide mediator, creating it on first use."""
    global _mediator_instance

    if _mediator_instance is None:
        logger.info("Initializing mediator")
        _mediator_instance = build_mediator()

    return _mediator_instance


def reset_mediator() -> None:
    """
    Resets the cached mediator instance.

    Useful for testing.
    """
    global _mediator_instance
    _mediator_instance = None
