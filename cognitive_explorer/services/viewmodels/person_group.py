"""Face API person group view model."""

import logging
from typing import Optional

from cognitive_explorer.models import CognitiveServiceConfig, Profile
from cognitive_explorer.services.mediator import Mediator
from cognitive_explorer.services.requests import face as face_requests
from cognitive_explorer.services.requests import person as person_requests
from cognitive_explorer.services.requests import person_group as person_group_requests
from cognitive_explorer.services.viewmodels.base import BaseViewModel

logger = logging.getLogger(__name__)


class PersonGroupViewModel(BaseViewModel):
    """
    State of the person group page.

    Manages one person group (create, update, train, ...) and the persons
    inside it. Each operation keeps its own JSON result.
    """

    api_name = "Face API"

    def __init__(self, mediator: Mediator):
        super().__init__(mediator)
        self.group_id: str = "explorer-group"
        self.name: str = "Explorer group"
        self.user_data: str = ""
        self.recognition_model: str = face_requests.DEFAULT_RECOGNITION_MODEL

        self.person_name: str = ""
        self.person_id: str = ""
        self.image_url: str = ""

        self.create_json: Optional[str] = ""
        self.update_json: Optional[str] = ""
        self.get_json: Optional[str] = ""
        self.list_json: Optional[str] = ""
        self.delete_json: Optional[str] = ""
        self.train_json: Optional[str] = ""
        self.training_status_json: Optional[str] = ""
        self.create_person_json: Optional[str] = ""
        self.list_persons_json: Optional[str] = ""
        self.add_face_json: Optional[str] = ""

        self.update_requests()

    def _select_config(self, profile: Profile) -> Optional[CognitiveServiceConfig]:
        return profile.face_api_config

    def update_requests(self) -> None:
        user_data = self.user_data or None
        self.requests = [
            person_group_requests.create(self.group_id, self.name, user_data, self.recognition_model),
            person_group_requests.update(self.group_id, self.name, user_data),
            person_group_requests.get(self.group_id),
            person_group_requests.list_groups(),
            person_group_requests.delete(self.group_id),
            person_group_requests.train(self.group_id),
            person_group_requests.check_training(self.group_id),
            person_requests.create(self.group_id, self.person_name),
            person_requests.list_persons(self.group_id),
        ]
        if self.person_id and self.image_url:
            self.requests.append(person_requests.add_face(self.group_id, self.person_id, self.image_url))

    async def create_group(self) -> None:
        self.update_requests()
        self.create_json = await self.make_request(
            person_group_requests.create(self.group_id, self.name, self.user_data or None, self.recognition_model)
        )

    async def update_group(self) -> None:
        self.update_requests()
        self.update_json = await self.make_request(
            person_group_requests.update(self.group_id, self.name, self.user_data or None)
        )

    async def get_group(self) -> None:
        self.update_requests()
        self.get_json = await self.make_request(person_group_requests.get(self.group_id))

    async def list_groups(self) -> None:
        self.update_requests()
        self.list_json = await self.make_request(person_group_requests.list_groups())

    async def delete_group(self) -> None:
        self.update_requests()
        self.delete_json = await self.make_request(person_group_requests.delete(self.group_id))

    async def train_group(self) -> None:
        self.update_requests()
        self.train_json = await self.make_request(person_group_requests.train(self.group_id))

    async def check_training(self) -> None:
        self.update_requests()
        self.training_status_json = await self.make_request(person_group_requests.check_training(self.group_id))

    async def create_person(self) -> None:
        """Creates a person and remembers its id for add_face."""
        self.update_requests()
        self.create_person_json = await self.make_request(
            person_requests.create(self.group_id, self.person_name)
        )
        created = self.parse_json(self.create_person_json)
        if isinstance(created, dict) and created.get("personId"):
            self.person_id = created["personId"]
            logger.info(f"Created person {self.person_id} in group {self.group_id}")
            self.update_requests()

    async def list_persons(self) -> None:
        self.update_requests()
        self.list_persons_json = await self.make_request(person_requests.list_persons(self.group_id))

    async def add_face(self) -> None:
        self.update_requests()
        if not self.person_id:
            self.error = "Select or create a person first"
            return
        self.add_face_json = await self.make_request(
            person_requests.add_face(self.group_id, self.person_id, self.image_url)
        )
