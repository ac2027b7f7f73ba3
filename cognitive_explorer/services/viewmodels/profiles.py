"""Service profile view model."""

import logging
from typing import Optional

from pydantic import ValidationError

from cognitive_explorer.models import Profile, ProfileCreate
from cognitive_explorer.services.mediator import (
    DeleteProfileCommand,
    GetCurrentProfileQuery,
    ListProfilesQuery,
    Mediator,
    SaveProfileCommand,
    SelectProfileCommand,
)

logger = logging.getLogger(__name__)


class ProfileViewModel:
    """
    State of the profile settings page.

    Lists, saves, selects and deletes profiles through the mediator.
    Failures are recovered into `error`.
    """

    def __init__(self, mediator: Mediator):
        self._mediator = mediator
        self.profiles: list[Profile] = []
        self.current: Optional[Profile] = None
        self.error: str = ""
        self.message: str = ""

    async def load(self) -> None:
        await self._run(self._load)

    async def save(self, data: dict) -> None:
        async def _save():
            try:
                profile = ProfileCreate.model_validate(data)
            except ValidationError as e:
                self.error = "; ".join(err["msg"] for err in e.errors())
                return
            saved = await self._mediator.send(SaveProfileCommand(profile=profile))
            self.message = f"Profile '{saved.name}' saved"
            await self._load()

        await self._run(_save)

    async def select(self, name: str) -> None:
        async def _select():
            await self._mediator.send(SelectProfileCommand(name=name))
            self.message = f"Profile '{name}' selected"
            await self._load()

        await self._run(_select)

    async def delete(self, name: str) -> None:
        async def _delete():
            await self._mediator.send(DeleteProfileCommand(name=name))
            self.message = f"Profile '{name}' deleted"
            await self._load()

        await self._run(_delete)

    async def _load(self) -> None:
        self.profiles = await self._mediator.send(ListProfilesQuery())
        self.current = await self._mediator.send(GetCurrentProfileQuery())

    async def _run(self, action) -> None:
        self.error = ""
        self.message = ""
        try:
            await action()
        except LookupError as e:
            self.error = str(e)
        except Exception as e:
            logger.exception("Profile operation failed")
            self.error = str(e)
