"""Tests for the Face API person and detection request generators."""

import json

from cognitive_explorer.services.requests import face, person


class TestPersonRequests:
    def test_create(self):
        request = person.create("friends", "Ada", user_data="engineer")

        assert request.http_method == "POST"
        assert request.relative_path == "face/v1.0/persongroups/friends/persons"
        assert json.loads(request.body) == {"name": "Ada", "userData": "engineer"}

    def test_list_and_delete(self):
        assert person.list_persons("friends").relative_path == "face/v1.0/persongroups/friends/persons"

        delete = person.delete("friends", "p-1")
        assert delete.http_method == "DELETE"
        assert delete.relative_path == "face/v1.0/persongroups/friends/persons/p-1"

    def test_add_face(self):
        request = person.add_face("friends", "p-1", "https://example.com/ada.jpg", detection_model="detection_03")

        assert request.relative_path == "face/v1.0/persongroups/friends/persons/p-1/persistedFaces"
        assert request.queries == {"detectionModel": "detection_03"}
        assert json.loads(request.body) == {"url": "https://example.com/ada.jpg"}

    def test_add_face_without_detection_model(self):
        request = person.add_face("friends", "p-1", "https://example.com/ada.jpg")

        assert request.queries == {}


class TestFaceRequests:
    def test_detect(self):
        request = face.detect("https://example.com/group.jpg")

        assert request.http_method == "POST"
        assert request.relative_path == "face/v1.0/detect"
        assert request.queries["returnFaceId"] == "true"
        assert request.queries["recognitionModel"] == face.DEFAULT_RECOGNITION_MODEL
        assert request.queries["detectionModel"] == face.DEFAULT_DETECTION_MODEL
        assert json.loads(request.body) == {"url": "https://example.com/group.jpg"}

    def test_identify_body(self):
        request = face.identify("friends", ["f1", "f2"], max_candidates=3, confidence_threshold=0.6)

        assert request.relative_path == "face/v1.0/identify"
        assert json.loads(request.body) == {
            "personGroupId": "friends",
            "faceIds": ["f1", "f2"],
            "maxNumOfCandidatesReturned": 3,
            "confidenceThreshold": 0.6,
        }

    def test_identify_omits_threshold_by_default(self):
        body = json.loads(face.identify("friends", ["f1"]).body)

        assert "confidenceThreshold" not in body
