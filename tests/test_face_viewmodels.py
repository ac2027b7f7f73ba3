"""Tests for the person group and face detection view models."""

import json

import pytest

from cognitive_explorer.services.mediator import CognitiveServicesHttpError
from cognitive_explorer.services.viewmodels import FaceViewModel, PersonGroupViewModel


class TestPersonGroupViewModel:
    def test_requests_follow_form_fields(self, fake_mediator_factory):
        vm = PersonGroupViewModel(fake_mediator_factory())
        vm.group_id = "friends"
        vm.name = "Friends"
        vm.user_data = ""

        vm.update_requests()

        create = vm.requests[0]
        assert create.relative_path == "face/v1.0/persongroups/friends"
        assert "userData" not in json.loads(create.body)
        assert all(
            r.relative_path.startswith("face/v1.0/persongroups") for r in vm.requests
        )

    @pytest.mark.asyncio
    async def test_create_group_sends_put(self, fake_mediator_factory, profile):
        mediator = fake_mediator_factory(profile=profile, response="")
        vm = PersonGroupViewModel(mediator)
        vm.group_id = "friends"
        vm.name = "Friends"
        vm.user_data = "my friends"

        await vm.create_group()

        assert vm.error == ""
        assert vm.create_json == ""
        command = mediator.executed[0]
        assert command.request.http_method == "PUT"
        assert json.loads(command.request.body) == {
            "name": "Friends",
            "recognitionModel": "recognition_04",
            "userData": "my friends",
        }
        assert command.config.key == "face-secret"

    @pytest.mark.asyncio
    async def test_missing_face_config(self, fake_mediator_factory, profile):
        profile.face_base_url = ""
        mediator = fake_mediator_factory(profile=profile)
        vm = PersonGroupViewModel(mediator)

        await vm.list_groups()

        assert vm.error == "Face API configuration is not set\n"
        assert mediator.executed == []

    @pytest.mark.asyncio
    async def test_api_error_is_formatted(self, fake_mediator_factory, profile):
        error = CognitiveServicesHttpError(
            "GET",
            "https://westeurope/face/v1.0/persongroups/missing",
            404,
            "Not Found",
            '{"error":{"code":"PersonGroupNotFound","message":"Person group is not found."}}',
        )
        vm = PersonGroupViewModel(fake_mediator_factory(profile=profile, exception=error))

        await vm.get_group()

        assert vm.error == "Face API error code PersonGroupNotFound: \nPerson group is not found."

    @pytest.mark.asyncio
    async def test_create_person_remembers_id(self, fake_mediator_factory, profile):
        mediator = fake_mediator_factory(profile=profile, response='{"personId":"25985303-c537-4467-b41d-bdb45cd95ca1"}')
        vm = PersonGroupViewModel(mediator)
        vm.person_name = "Ada"
        vm.image_url = "https://example.com/ada.jpg"

        await vm.create_person()

        assert vm.person_id == "25985303-c537-4467-b41d-bdb45cd95ca1"
        assert vm.requests[-1].relative_path.endswith("/persistedFaces")

    @pytest.mark.asyncio
    async def test_add_face_requires_person(self, fake_mediator_factory, profile):
        mediator = fake_mediator_factory(profile=profile)
        vm = PersonGroupViewModel(mediator)

        await vm.add_face()

        assert vm.error == "Select or create a person first"
        assert mediator.executed == []


class TestFaceViewModel:
    @pytest.mark.asyncio
    async def test_detect_keeps_face_ids(self, fake_mediator_factory, profile):
        response = json.dumps([
            {"faceId": "f1", "faceRectangle": {"top": 1}},
            {"faceId": "f2", "faceRectangle": {"top": 2}},
        ])
        vm = FaceViewModel(fake_mediator_factory(profile=profile, response=response))
        vm.image_url = "https://example.com/group.jpg"
        vm.group_id = "friends"

        await vm.detect_faces()

        assert vm.face_ids == ["f1", "f2"]
        assert vm.detect_json == response
        assert vm.requests[-1].relative_path == "face/v1.0/identify"

    @pytest.mark.asyncio
    async def test_failed_detection_clears_face_ids(self, fake_mediator_factory, profile):
        vm = FaceViewModel(fake_mediator_factory(profile=profile, exception=RuntimeError("timeout")))
        vm.face_ids = ["stale"]
        vm.identify_json = "[]"

        await vm.detect_faces()

        assert vm.face_ids == []
        assert vm.identify_json == ""
        assert vm.error == "timeout"

    @pytest.mark.asyncio
    async def test_identify_requires_detection(self, fake_mediator_factory, profile):
        mediator = fake_mediator_factory(profile=profile)
        vm = FaceViewModel(mediator)
        vm.group_id = "friends"

        await vm.identify_faces()

        assert vm.error == "Detect faces before identifying them"
        assert mediator.executed == []

    @pytest.mark.asyncio
    async def test_identify_requires_group(self, fake_mediator_factory, profile):
        vm = FaceViewModel(fake_mediator_factory(profile=profile))
        vm.face_ids = ["f1"]

        await vm.identify_faces()

        assert vm.error == "Person group id is not set"

    @pytest.mark.asyncio
    async def test_identify_caps_face_ids(self, fake_mediator_factory, profile):
        mediator = fake_mediator_factory(profile=profile, response="[]")
        vm = FaceViewModel(mediator)
        vm.group_id = "friends"
        vm.face_ids = [f"f{i}" for i in range(15)]

        await vm.identify_faces()

        body = json.loads(mediator.executed[0].request.body)
        assert len(body["faceIds"]) == 10
        assert vm.identify_json == "[]"
