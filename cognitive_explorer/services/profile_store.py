"""
Profile Store - persistence of Cognitive Services profiles.

A profile groups the endpoints and subscription keys of the Face and Text
Analytics services. Exactly one profile is current at a time once any
profile exists; view models always read their configuration from it.
"""

import logging
from typing import Optional

from sqlmodel import Session, select

from cognitive_explorer.models import Profile, ProfileCreate, utcnow
from cognitive_explorer.services.secret_manager import (
    get_settings,
    get_face_api_key,
    get_text_api_key,
)

logger = logging.getLogger(__name__)


class ProfileStore:
    """
    CRUD operations over persisted profiles.

    Raises LookupError for operations on unknown profile names.
    """

    def __init__(self, session: Session):
        self.session = session

    def list_profiles(self) -> list[Profile]:
        statement = select(Profile).order_by(Profile.name)
        return list(self.session.exec(statement).all())

    def get_profile(self, name: str) -> Optional[Profile]:
        statement = select(Profile).where(Profile.name == name)
        return self.session.exec(statement).first()

    def get_current(self) -> Optional[Profile]:
        """Returns the current profile, or None if the store is empty."""
        statement = select(Profile).where(Profile.is_current == True)  # noqa: E712
        return self.session.exec(statement).first()

    def save(self, data: ProfileCreate) -> Profile:
        """
        Creates a profile or replaces the endpoints and keys of an existing one.

        The first profile saved into an empty store becomes current.
        """
        profile = self.get_profile(data.name)

        if profile is None:
            profile = Profile(
                name=data.name,
                is_current=self.get_current() is None,
            )
            logger.info(f"Creating profile '{data.name}'")
        else:
            logger.info(f"Updating profile '{data.name}'")

        profile.face_base_url = data.face_base_url.strip()
        profile.face_key = data.face_key.strip()
        profile.text_base_url = data.text_base_url.strip()
        profile.text_key = data.text_key.strip()
        profile.updated_at = utcnow()

        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def select(self, name: str) -> Profile:
        """Makes the named profile current."""
        profile = self.get_profile(name)
        if profile is None:
            raise LookupError(f"Profile '{name}' not found")

        for other in self.list_profiles():
            if other.is_current and other.id != profile.id:
                other.is_current = False
                self.session.add(other)

        profile.is_current = True
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)

        logger.info(f"Selected profile '{name}'")
        return profile

    def delete(self, name: str) -> None:
        """
        Deletes the named profile.

        If the current profile is deleted, the first remaining profile
        (by name) becomes current.
        """
        profile = self.get_profile(name)
        if profile is None:
            raise LookupError(f"Profile '{name}' not found")

        was_current = profile.is_current
        self.session.delete(profile)
        self.session.commit()
        logger.info(f"Deleted profile '{name}'")

        if was_current:
            remaining = self.list_profiles()
            if remaining:
                self.select(remaining[0].name)


def seed_default_profile(session: Session) -> Optional[Profile]:
    """
    Seeds the default profile from settings into an empty store.

    Nothing is created when profiles already exist or when no service
    base URL is configured.
    """
    settings = get_settings()
    store = ProfileStore(session)

    if store.list_profiles():
        return None
    if not (settings.face_api_base_url or settings.text_api_base_url):
        return None

    data = ProfileCreate(
        name=settings.default_profile_name,
        face_base_url=settings.face_api_base_url,
        face_key=get_face_api_key() if settings.face_api_base_url else "",
        text_base_url=settings.text_api_base_url,
        text_key=get_text_api_key() if settings.text_api_base_url else "",
    )
    logger.info(f"Seeding default profile '{data.name}' from settings")
    return store.save(data)
