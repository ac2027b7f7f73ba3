"""Face API detection and identification request generators."""

from typing import Optional

from cognitive_explorer.services.requests.base import (
    HttpRequest,
    JSON_CONTENT_TYPE,
    face_api_transaction,
    serialize_body,
)
from cognitive_explorer.services.requests.person_group import FACE_API_ROOT, FACE_API_DOCS

RECOGNITION_MODELS = ["recognition_01", "recognition_02", "recognition_03", "recognition_04"]
DEFAULT_RECOGNITION_MODEL = "recognition_04"

DETECTION_MODELS = ["detection_01", "detection_02", "detection_03"]
DEFAULT_DETECTION_MODEL = "detection_03"

MAX_IDENTIFY_FACE_IDS = 10


def detect(
    image_url: str,
    recognition_model: str = DEFAULT_RECOGNITION_MODEL,
    detection_model: str = DEFAULT_DETECTION_MODEL,
) -> HttpRequest:
    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=f"{FACE_API_ROOT}/detect",
        queries={
            "returnFaceId": "true",
            "returnFaceLandmarks": "false",
            "returnRecognitionModel": "true",
            "recognitionModel": recognition_model,
            "detectionModel": detection_model,
        },
        body=serialize_body(url=image_url),
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395236",
    )


def identify(
    group_id: str,
    face_ids: list[str],
    max_candidates: int = 1,
    confidence_threshold: Optional[float] = None,
) -> HttpRequest:
    """
    Identifies detected faces against a trained person group.

    The service accepts between 1 and MAX_IDENTIFY_FACE_IDS face ids per call.
    """
    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=f"{FACE_API_ROOT}/identify",
        body=serialize_body(
            personGroupId=group_id,
            faceIds=list(face_ids),
            maxNumOfCandidatesReturned=max_candidates,
            confidenceThreshold=confidence_threshold,
        ),
        cost=face_api_transaction(1),
        cognitive_service_doc=f"{FACE_API_DOCS}/563879b61984550f30395239",
    )
