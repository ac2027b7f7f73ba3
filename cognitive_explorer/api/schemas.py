"""
Pydantic schemas for API request/response validation.

These are separate from the persisted models so subscription keys never
leave the service.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from cognitive_explorer.models import Profile
from cognitive_explorer.services.requests.base import HttpRequest
from cognitive_explorer.services.requests.text import DEFAULT_LANGUAGE, STABLE_VERSION


# ============ Request Schemas ============

class ProfileRequest(BaseModel):
    """Request to create or replace a profile."""
    name: str = Field(..., min_length=1, max_length=100, description="Profile name")
    face_base_url: str = Field(default="", max_length=500, description="Face API endpoint")
    face_key: str = Field(default="", max_length=200, description="Face API subscription key")
    text_base_url: str = Field(default="", max_length=500, description="Text Analytics endpoint")
    text_key: str = Field(default="", max_length=200, description="Text Analytics subscription key")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("profile name must not be empty")
        return v

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "westeurope",
                    "face_base_url": "https://westeurope.api.cognitive.microsoft.com",
                    "face_key": "<face key>",
                    "text_base_url": "https://westeurope.api.cognitive.microsoft.com",
                    "text_key": "<text key>",
                }
            ]
        }
    }


class TextAnalysisRequest(BaseModel):
    """Request to run one Text Analytics operation."""
    text: str = Field(..., min_length=1, max_length=5120, description="Document text")
    language: str = Field(default=DEFAULT_LANGUAGE, max_length=10, description="Document language")
    version: str = Field(default=STABLE_VERSION, description="Text Analytics API version")


# ============ Response Schemas ============

class ProfileResponse(BaseModel):
    """Profile details without subscription keys."""
    name: str
    face_base_url: str
    face_key_set: bool
    text_base_url: str
    text_key_set: bool
    is_current: bool
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            name=profile.name,
            face_base_url=profile.face_base_url,
            face_key_set=bool(profile.face_key),
            text_base_url=profile.text_base_url,
            text_key_set=bool(profile.text_key),
            is_current=profile.is_current,
            updated_at=profile.updated_at,
        )


class RequestPreviewResponse(BaseModel):
    """A request descriptor as shown in the UI."""
    http_method: str
    content_type: Optional[str]
    relative_path: str
    queries: dict[str, str]
    body: Optional[str]
    cost: str
    estimated_cost: float
    cognitive_service_doc: str

    @classmethod
    def from_request(cls, request: HttpRequest) -> "RequestPreviewResponse":
        return cls(
            http_method=request.http_method,
            content_type=request.content_type,
            relative_path=request.relative_path,
            queries=request.queries,
            body=request.body,
            cost=str(request.cost),
            estimated_cost=request.cost.estimated_cost,
            cognitive_service_doc=request.cognitive_service_doc,
        )


class OperationResultResponse(BaseModel):
    """Outcome of a view model operation: raw JSON or an error string."""
    operation: str
    json_result: Optional[str] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    database: str
    current_profile: Optional[str]
    version: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
