"""
Commands and queries sent through the mediator.

These are plain Pydantic models; the mediator routes them by type.
"""

from pydantic import BaseModel, ConfigDict

from cognitive_explorer.models import CognitiveServiceConfig, ProfileCreate
from cognitive_explorer.services.requests.base import HttpRequest


class ExecuteCognitiveServicesCommand(BaseModel):
    """Executes a request descriptor against a configured service. Returns the raw body."""
    model_config = ConfigDict(frozen=True)

    request: HttpRequest
    config: CognitiveServiceConfig


class GetCurrentProfileQuery(BaseModel):
    """Returns the current Profile, or None when no profile exists."""


class ListProfilesQuery(BaseModel):
    """Returns all profiles ordered by name."""


class SaveProfileCommand(BaseModel):
    """Creates or replaces a profile. Returns the saved Profile."""
    profile: ProfileCreate


class SelectProfileCommand(BaseModel):
    """Makes a profile current. Returns the selected Profile."""
    name: str


class DeleteProfileCommand(BaseModel):
    """Deletes a profile."""
    name: str
