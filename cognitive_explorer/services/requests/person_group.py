"""
Face API person group request generators.

Each function returns a fully populated HttpRequest. Inputs are not
validated here; a malformed identifier produces a malformed path which the
service rejects when the request is executed.
"""

from cognitive_explorer.services.requests.base import (
    HttpRequest,
    JSON_CONTENT_TYPE,
    face_api_transaction,
    serialize_body,
)

FACE_API_ROOT = "face/v1.0"
FACE_API_DOCS = "https://westus.dev.cognitive.microsoft.com/docs/services/563879b61984550e40cbbe8d/operations"


def create(group_id: str, name: str, user_data: str = None, recognition_model: str = None) -> HttpRequest:
    return HttpRequest(
        http_method="PUT",
        content_type=JSON_CONTENT_TYPE,
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}",
        body=serialize_body(
            name=name,
            recognitionModel=recognition_model,
            userData=user_data,
        ),
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395244",
    )


def update(group_id: str, name: str, user_data: str = None) -> HttpRequest:
    return HttpRequest(
        http_method="PATCH",
        content_type=JSON_CONTENT_TYPE,
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}",
        body=serialize_body(
            name=name,
            userData=user_data,
        ),
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f3039524a",
    )


def get(group_id: str) -> HttpRequest:
    return HttpRequest(
        http_method="GET",
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}",
        queries={"returnRecognitionModel": "true"},
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395246",
    )


def list_groups() -> HttpRequest:
    return HttpRequest(
        http_method="GET",
        relative_path=f"{FACE_API_ROOT}/persongroups",
        queries={"returnRecognitionModel": "true"},
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395248",
    )


def delete(group_id: str) -> HttpRequest:
    return HttpRequest(
        http_method="DELETE",
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}",
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395245",
    )


def train(group_id: str) -> HttpRequest:
    return HttpRequest(
        http_method="POST",
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}/train",
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395249",
    )


def check_training(group_id: str) -> HttpRequest:
    return HttpRequest(
        http_method="GET",
        relative_path=f"{FACE_API_ROOT}/persongroups/{group_id}/training",
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395247",
    )
