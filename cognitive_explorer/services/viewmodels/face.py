"""Face API detection and identification view model."""

from typing import Optional

from cognitive_explorer.models import CognitiveServiceConfig, Profile
from cognitive_explorer.services.mediator import Mediator
from cognitive_explorer.services.requests import face as face_requests
from cognitive_explorer.services.viewmodels.base import BaseViewModel


class FaceViewModel(BaseViewModel):
    """
    State of the face detection page.

    Detected face ids are kept so they can be identified against a
    trained person group.
    """

    api_name = "Face API"

    def __init__(self, mediator: Mediator):
        super().__init__(mediator)
        self.image_url: str = ""
        self.recognition_model: str = face_requests.DEFAULT_RECOGNITION_MODEL
        self.detection_model: str = face_requests.DEFAULT_DETECTION_MODEL
        self.group_id: str = ""
        self.max_candidates: int = 1

        self.face_ids: list[str] = []
        self.detect_json: Optional[str] = ""
        self.identify_json: Optional[str] = ""

        self.update_requests()

    def _select_config(self, profile: Profile) -> Optional[CognitiveServiceConfig]:
        return profile.face_api_config

    def _identify_request(self):
        face_ids = self.face_ids[:face_requests.MAX_IDENTIFY_FACE_IDS]
        return face_requests.identify(self.group_id, face_ids, self.max_candidates)

    def update_requests(self) -> None:
        self.requests = [face_requests.detect(self.image_url, self.recognition_model, self.detection_model)]
        if self.group_id and self.face_ids:
            self.requests.append(self._identify_request())

    async def detect_faces(self) -> None:
        """Detects faces and keeps their ids; a new detection invalidates identification."""
        self.face_ids = []
        self.identify_json = ""
        self.update_requests()

        self.detect_json = await self.make_request(
            face_requests.detect(self.image_url, self.recognition_model, self.detection_model)
        )
        faces = self.parse_json(self.detect_json)
        if isinstance(faces, list):
            self.face_ids = [face["faceId"] for face in faces if isinstance(face, dict) and face.get("faceId")]
        self.update_requests()

    async def identify_faces(self) -> None:
        self.update_requests()
        if not self.face_ids:
            self.error = "Detect faces before identifying them"
            return
        if not self.group_id:
            self.error = "Person group id is not set"
            return

        self.identify_json = await self.make_request(self._identify_request())
