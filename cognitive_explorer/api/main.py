"""
FastAPI Application for Cognitive Services Explorer.

REST API for programmatic access to the explorer:
- request previews (what would be sent to Cognitive Services)
- Text Analytics operations through the same view models as the UI
- service profile management

Run with: uvicorn cognitive_explorer.api.main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from cognitive_explorer import __version__
from cognitive_explorer.database import init_db
from cognitive_explorer.models import ProfileCreate
from cognitive_explorer.services.mediator import (
    DeleteProfileCommand,
    GetCurrentProfileQuery,
    ListProfilesQuery,
    Mediator,
    SaveProfileCommand,
    SelectProfileCommand,
    get_mediator,
)
from cognitive_explorer.services.requests import text as text_requests
from cognitive_explorer.services.secret_manager import configure_logging
from cognitive_explorer.services.viewmodels import PersonGroupViewModel, TextViewModel
from cognitive_explorer.api.schemas import (
    ErrorResponse,
    HealthResponse,
    OperationResultResponse,
    ProfileRequest,
    ProfileResponse,
    RequestPreviewResponse,
    TextAnalysisRequest,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    configure_logging()
    logger.info("Initializing profile store...")
    init_db()
    logger.info("FastAPI started successfully")
    yield
    logger.info("FastAPI shutting down")


app = FastAPI(
    title="Cognitive Services Explorer API",
    description="""
## Cognitive Services Explorer API

Explore Azure Cognitive Services (Face, Text Analytics) REST operations.

### Features
- **Request previews**: method, path, query, body, cost and documentation of each call
- **Text Analytics**: run sentiment, key phrases, entities, language detection,
  entity linking and PII recognition against the current profile
- **Profiles**: manage named sets of service endpoints and keys

Subscription keys are write-only: responses only report whether a key is set.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    responses={
        404: {"model": ErrorResponse, "description": "Not Found"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ Health & Info Endpoints ============

@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check",
)
async def health_check(mediator: Mediator = Depends(get_mediator)):
    """Check API health and the profile store."""
    db_status = "healthy"
    current_name = None
    try:
        current = await mediator.send(GetCurrentProfileQuery())
        current_name = current.name if current else None
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        database=db_status,
        current_profile=current_name,
        version=__version__,
    )


@app.get(
    "/",
    tags=["System"],
    summary="API root",
)
async def root():
    """API root with documentation links."""
    return {
        "name": "Cognitive Services Explorer API",
        "version": __version__,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health",
    }


# ============ Profile Endpoints ============

@app.get(
    "/profiles",
    response_model=list[ProfileResponse],
    tags=["Profiles"],
    summary="List profiles",
)
async def list_profiles(mediator: Mediator = Depends(get_mediator)):
    try:
        profiles = await mediator.send(ListProfilesQuery())
        return [ProfileResponse.from_profile(p) for p in profiles]
    except Exception as e:
        logger.exception("Failed to list profiles")
        raise HTTPException(status_code=500, detail=str(e))


@app.get(
    "/profiles/current",
    response_model=ProfileResponse,
    tags=["Profiles"],
    summary="Get the current profile",
)
async def get_current_profile(mediator: Mediator = Depends(get_mediator)):
    try:
        profile = await mediator.send(GetCurrentProfileQuery())
    except Exception as e:
        logger.exception("Failed to fetch current profile")
        raise HTTPException(status_code=500, detail=str(e))

    if profile is None:
        raise HTTPException(status_code=404, detail="No profile configured")
    return ProfileResponse.from_profile(profile)


@app.post(
    "/profiles",
    response_model=ProfileResponse,
    tags=["Profiles"],
    summary="Create or replace a profile",
)
async def save_profile(request: ProfileRequest, mediator: Mediator = Depends(get_mediator)):
    """
    Creates a profile, or replaces the endpoints and keys of an existing one.

    The first profile created becomes current.
    """
    try:
        profile = await mediator.send(SaveProfileCommand(profile=ProfileCreate(**request.model_dump())))
        return ProfileResponse.from_profile(profile)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("Failed to save profile")
        raise HTTPException(status_code=500, detail=str(e))


@app.post(
    "/profiles/{name}/select",
    response_model=ProfileResponse,
    tags=["Profiles"],
    summary="Make a profile current",
)
async def select_profile(name: str, mediator: Mediator = Depends(get_mediator)):
    try:
        profile = await mediator.send(SelectProfileCommand(name=name))
        return ProfileResponse.from_profile(profile)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Failed to select profile")
        raise HTTPException(status_code=500, detail=str(e))


@app.delete(
    "/profiles/{name}",
    status_code=204,
    tags=["Profiles"],
    summary="Delete a profile",
)
async def delete_profile(name: str, mediator: Mediator = Depends(get_mediator)):
    try:
        await mediator.send(DeleteProfileCommand(name=name))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Failed to delete profile")
        raise HTTPException(status_code=500, detail=str(e))


# ============ Text Analytics Endpoints ============

@app.get(
    "/text/requests",
    response_model=list[RequestPreviewResponse],
    tags=["Text Analytics"],
    summary="Preview Text Analytics requests",
)
async def preview_text_requests(
    text: str = Query(..., min_length=1, description="Document text"),
    language: str = Query(default=text_requests.DEFAULT_LANGUAGE),
    version: str = Query(default=text_requests.STABLE_VERSION),
):
    """Returns the requests offered for the API version, without sending them."""
    requests = text_requests.requests_for_version(text, language, version)
    return [RequestPreviewResponse.from_request(r) for r in requests]


@app.post(
    "/text/{operation}",
    response_model=OperationResultResponse,
    tags=["Text Analytics"],
    summary="Run a Text Analytics operation",
)
async def run_text_operation(
    operation: str,
    request: TextAnalysisRequest,
    mediator: Mediator = Depends(get_mediator),
):
    """
    Runs one operation against the current profile's Text Analytics service.

    Operations: sentiment, key-phrases, entities, languages, entity-linking, pii.

    Service failures are reported in `error` with status 200, as in the UI.
    """
    if operation not in TextViewModel.OPERATIONS:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown operation: {operation}. Use one of: {', '.join(TextViewModel.OPERATIONS)}",
        )

    view_model = TextViewModel(mediator)
    view_model.text = request.text
    view_model.language = request.language
    view_model.text_api_version = request.version

    result = await view_model.run_operation(operation)
    return OperationResultResponse(
        operation=operation,
        json_result=result,
        error=view_model.error or None,
    )


# ============ Face Endpoints ============

@app.get(
    "/face/person-groups/requests",
    response_model=list[RequestPreviewResponse],
    tags=["Face"],
    summary="Preview person group requests",
)
async def preview_person_group_requests(
    group_id: str = Query(..., min_length=1, max_length=64),
    name: str = Query(..., min_length=1, max_length=128),
    user_data: str = Query(default=""),
    mediator: Mediator = Depends(get_mediator),
):
    view_model = PersonGroupViewModel(mediator)
    view_model.group_id = group_id
    view_model.name = name
    view_model.user_data = user_data
    view_model.update_requests()
    return [RequestPreviewResponse.from_request(r) for r in view_model.requests]
