"""
Data models for Cognitive Services Explorer.

Uses SQLModel for the persisted service profiles and plain Pydantic models
for the service configuration and the API error payload.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, field_validator
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Current time in UTC, timezone-aware."""
    return datetime.now(timezone.utc)


class CognitiveServiceConfig(BaseModel):
    """
    Endpoint and subscription key of a single Cognitive Service.

    Consumed read-only by view models and the HTTP handler.
    """
    base_url: str = ""
    key: str = ""

    def is_configured(self) -> bool:
        base_url = self.base_url.strip().lower()
        return bool(self.key.strip()) and base_url.startswith(("http://", "https://"))

    def build_url(self, relative_path: str) -> str:
        """Joins the base URL and a relative API path with a single slash."""
        return f"{self.base_url.rstrip('/')}/{relative_path.lstrip('/')}"


class Profile(SQLModel, table=True):
    """
    Named set of Cognitive Services endpoints and keys.

    At most one profile is current; its configs feed every view model.
    Keys are secrets and must never be logged.
    """
    __tablename__ = "profiles"
    __table_args__ = {"extend_existing": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True, unique=True)

    face_base_url: str = Field(default="", max_length=500)
    face_key: str = Field(default="", max_length=200)
    text_base_url: str = Field(default="", max_length=500)
    text_key: str = Field(default="", max_length=200)

    is_current: bool = Field(default=False, index=True)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def face_api_config(self) -> Optional[CognitiveServiceConfig]:
        if not self.face_base_url:
            return None
        return CognitiveServiceConfig(base_url=self.face_base_url, key=self.face_key)

    @property
    def text_api_config(self) -> Optional[CognitiveServiceConfig]:
        if not self.text_base_url:
            return None
        return CognitiveServiceConfig(base_url=self.text_base_url, key=self.text_key)


class ProfileCreate(SQLModel):
    """Input model for creating or replacing a profile."""
    name: str = Field(max_length=100)
    face_base_url: str = Field(default="", max_length=500)
    face_key: str = Field(default="", max_length=200)
    text_base_url: str = Field(default="", max_length=500)
    text_key: str = Field(default="", max_length=200)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("profile name must not be empty")
        return v


# Error payload returned by the Face and Text Analytics APIs:
# {"error": {"code": "...", "message": "..."}}

class ApiError(BaseModel):
    """Code and message of an API-reported error."""
    code: Optional[str] = None
    message: Optional[str] = None

    @field_validator("code", mode="before")
    @classmethod
    def coerce_code(cls, v):
        # Some endpoints report numeric codes
        return None if v is None else str(v)


class ErrorResponse(BaseModel):
    """Envelope of an API error body."""
    error: Optional[ApiError] = None
