"""Shared fixtures: in-memory profile store and a recording fake mediator."""

from contextlib import contextmanager
from typing import Any, Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from cognitive_explorer.models import Profile
from cognitive_explorer.services.mediator import (
    ExecuteCognitiveServicesCommand,
    GetCurrentProfileQuery,
)
from cognitive_explorer.services.secret_manager import get_settings

FACE_ENDPOINT = "https://westeurope.api.cognitive.microsoft.com"
TEXT_ENDPOINT = "https://westeurope.api.cognitive.microsoft.com/"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    @contextmanager
    def factory():
        session = Session(engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


@pytest.fixture
def profile() -> Profile:
    return Profile(
        name="test",
        face_base_url=FACE_ENDPOINT,
        face_key="face-secret",
        text_base_url=TEXT_ENDPOINT,
        text_key="text-secret",
        is_current=True,
    )


class FakeMediator:
    """
    Mediator double for view model tests.

    Answers GetCurrentProfileQuery with `profile` and
    ExecuteCognitiveServicesCommand with `response` (or raises `exception`).
    Every message sent is recorded.
    """

    def __init__(self, profile: Optional[Profile] = None, response: Any = "{}", exception: Exception = None):
        self.profile = profile
        self.response = response
        self.exception = exception
        self.sent: list[Any] = []

    @property
    def executed(self) -> list[ExecuteCognitiveServicesCommand]:
        return [m for m in self.sent if isinstance(m, ExecuteCognitiveServicesCommand)]

    async def send(self, message: Any) -> Any:
        self.sent.append(message)
        if isinstance(message, GetCurrentProfileQuery):
            return self.profile
        if isinstance(message, ExecuteCognitiveServicesCommand):
            if self.exception is not None:
                raise self.exception
            return self.response
        raise LookupError(f"No handler registered for {type(message).__name__}")


@pytest.fixture
def fake_mediator_factory():
    return FakeMediator
