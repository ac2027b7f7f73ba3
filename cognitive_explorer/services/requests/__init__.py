"""
Request generators for Cognitive Services REST operations.

Modules:
- person_group: Face API person groups
- person: Face API person group persons
- face: Face API detection and identification
- text: Text Analytics (stable and preview versions)
"""

from cognitive_explorer.services.requests.base import (
    HttpRequest,
    ServiceCost,
    face_api_transaction,
    text_api_records,
)
from cognitive_explorer.services.requests import face, person, person_group, text

__all__ = [
    "HttpRequest",
    "ServiceCost",
    "face_api_transaction",
    "text_api_records",
    "face",
    "person",
    "person_group",
    "text",
]
