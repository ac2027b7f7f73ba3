"""
Mediator layer.

View models send commands and queries here; handlers perform the HTTP
calls to Cognitive Services and the profile store reads/writes.
"""

from cognitive_explorer.services.mediator.base import BaseHandler, Mediator
from cognitive_explorer.services.mediator.commands import (
    DeleteProfileCommand,
    ExecuteCognitiveServicesCommand,
    GetCurrentProfileQuery,
    ListProfilesQuery,
    SaveProfileCommand,
    SelectProfileCommand,
)
from cognitive_explorer.services.mediator.factory import build_mediator, get_mediator, reset_mediator
from cognitive_explorer.services.mediator.handlers import CognitiveServicesHttpError

__all__ = [
    "BaseHandler",
    "Mediator",
    "CognitiveServicesHttpError",
    "DeleteProfileCommand",
    "ExecuteCognitiveServicesCommand",
    "GetCurrentProfileQuery",
    "ListProfilesQuery",
    "SaveProfileCommand",
    "SelectProfileCommand",
    "build_mediator",
    "get_mediator",
    "reset_mediator",
]
