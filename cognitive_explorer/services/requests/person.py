"""Face API person group person request generators."""

from cognitive_explorer.services.requests.base import (
    HttpRequest,
    JSON_CONTENT_TYPE,
    face_api_transaction,
    serialize_body,
)
from cognitive_explorer.services.requests.person_group import FACE_API_ROOT, FACE_API_DOCS


def create(group_id: str, name: str, user_data: str = None) -> HttpRequest:
    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}/persons",
        body=serialize_body(
            name=name,
            userData=user_data,
        ),
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f3039523c",
    )


def list_persons(group_id: str) -> HttpRequest:
    return HttpRequest(
        http_method="GET",
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}/persons",
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395241",
    )


def delete(group_id: str, person_id: str) -> HttpRequest:
    return HttpRequest(
        http_method="DELETE",
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}/persons/{person_id}",
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f3039523d",
    )


def add_face(group_id: str, person_id: str, image_url: str, detection_model: str = None) -> HttpRequest:
    """Adds a face image (by URL) to a person. One detection, one transaction."""
    queries = {}
    if detection_model:
        queries["detectionModel"] = detection_model

    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}/persons/{person_id}/persistedFaces",
        queries=queries,
        body=serialize_body(url=image_url),
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f3039523b",
    )
