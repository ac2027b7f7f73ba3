"""
Text Analytics request generators.

Every operation sends a single document. The stable and preview API
versions share paths and body shapes; the preview version adds opinion
mining to sentiment analysis and the PII entity recognition endpoint.
"""

from cognitive_explorer.services.requests.base import (
    HttpRequest,
    JSON_CONTENT_TYPE,
    serialize_body,
    text_api_records,
)

STABLE_VERSION = "v3.0"
PREVIEW_VERSION = "v3.1-preview.1"
SUPPORTED_VERSIONS = [STABLE_VERSION, PREVIEW_VERSION]

DEFAULT_LANGUAGE = "en"

DOCUMENT_ID = "1"

_DOCS = {
    STABLE_VERSION: "https://westus2.dev.cognitive.microsoft.com/docs/services/TextAnalytics-v3-0/operations",
    PREVIEW_VERSION: "https://westcentralus.dev.cognitive.microsoft.com/docs/services/TextAnalytics-v3-1-Preview-1/operations",
}


def _path(version: str, operation: str) -> str:
    return f"text/analytics/{version}/{operation}"


def _doc(version: str, operation_id: str) -> str:
    return f"{_DOCS.get(version, _DOCS[STABLE_VERSION])}/{operation_id}"


def _documents(text: str, language: str) -> str:
    return serialize_body(documents=[{"id": DOCUMENT_ID, "language": language, "text": text}])


def sentiment(text: str, language: str = DEFAULT_LANGUAGE, version: str = STABLE_VERSION) -> HttpRequest:
    queries = {}
    if version == PREVIEW_VERSION:
        queries["opinionMining"] = "true"

    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=_path(version, "sentiment"),
        queries=queries,
        body=_documents(text, language),
        cost=text_api_records(1),
        cognitive_service_doc=_doc(version, "Sentiment"),
    )


def key_phrases(text: str, language: str = DEFAULT_LANGUAGE, version: str = STABLE_VERSION) -> HttpRequest:
    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=_path(version, "keyPhrases"),
        body=_documents(text, language),
        cost=text_api_records(1),
        cognitive_service_doc=_doc(version, "KeyPhrases"),
    )


def entities(text: str, language: str = DEFAULT_LANGUAGE, version: str = STABLE_VERSION) -> HttpRequest:
    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=_path(version, "entities/recognition/general"),
        body=_documents(text, language),
        cost=text_api_records(1),
        cognitive_service_doc=_doc(version, "EntitiesRecognitionGeneral"),
    )


def detect_language(text: str, language: str = DEFAULT_LANGUAGE, version: str = STABLE_VERSION) -> HttpRequest:
    """Detects the language of the text. The document carries no language field."""
    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=_path(version, "languages"),
        body=serialize_body(documents=[{"id": DOCUMENT_ID, "text": text}]),
        cost=text_api_records(1),
        cognitive_service_doc=_doc(version, "Languages"),
    )


def entity_linking(text: str, language: str = DEFAULT_LANGUAGE, version: str = STABLE_VERSION) -> HttpRequest:
    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=_path(version, "entities/linking"),
        body=_documents(text, language),
        cost=text_api_records(1),
        cognitive_service_doc=_doc(version, "EntitiesLinking"),
    )


def entity_recognition_pii(text: str, language: str = DEFAULT_LANGUAGE, version: str = PREVIEW_VERSION) -> HttpRequest:
    """PII entity recognition. Only available on the preview API."""
    return HttpRequest(
        http_method="POST",
        content_type=JSON_CONTENT_TYPE,
        relative_path=_path(version, "entities/recognition/pii"),
        body=_documents(text, language),
        cost=text_api_records(1),
        cognitive_service_doc=_doc(version, "EntitiesRecognitionPii"),
    )


def requests_for_version(text: str, language: str, version: str) -> list[HttpRequest]:
    """
    Returns the requests offered for an API version, in display order.

    Both known versions offer entity linking; only the preview version
    offers PII entity recognition.
    """
    requests = [
        sentiment(text, language, version),
        key_phrases(text, language, version),
        entities(text, language, version),
        detect_language(text, language, version),
    ]

    if version == STABLE_VERSION:
        requests.append(entity_linking(text, language, version))
    elif version == PREVIEW_VERSION:
        requests.append(entity_linking(text, language, version))
        requests.append(entity_recognition_pii(text, language))

    return requests
