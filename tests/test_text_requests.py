"""Tests for the Text Analytics request generators."""

import json

import pytest

from cognitive_explorer.services.requests import text

SAMPLE = "Cognitive Services are awesome! 😁"


def _paths(requests):
    return [r.relative_path for r in requests]


class TestOperations:
    @pytest.mark.parametrize(
        "factory,suffix",
        [
            (text.sentiment, "sentiment"),
            (text.key_phrases, "keyPhrases"),
            (text.entities, "entities/recognition/general"),
            (text.entity_linking, "entities/linking"),
        ],
    )
    def test_paths_follow_version(self, factory, suffix):
        request = factory(SAMPLE, "en", text.STABLE_VERSION)

        assert request.http_method == "POST"
        assert request.relative_path == f"text/analytics/v3.0/{suffix}"

    def test_document_body(self):
        request = text.key_phrases(SAMPLE, "fr", text.STABLE_VERSION)

        assert json.loads(request.body) == {
            "documents": [{"id": "1", "language": "fr", "text": SAMPLE}]
        }
        assert "😁" in request.body

    def test_detect_language_omits_language(self):
        request = text.detect_language(SAMPLE, "en", text.STABLE_VERSION)

        assert request.relative_path == "text/analytics/v3.0/languages"
        assert json.loads(request.body) == {"documents": [{"id": "1", "text": SAMPLE}]}

    def test_sentiment_opinion_mining_only_on_preview(self):
        stable = text.sentiment(SAMPLE, "en", text.STABLE_VERSION)
        preview = text.sentiment(SAMPLE, "en", text.PREVIEW_VERSION)

        assert stable.queries == {}
        assert preview.queries == {"opinionMining": "true"}

    def test_pii_defaults_to_preview(self):
        request = text.entity_recognition_pii(SAMPLE, "en")

        assert request.relative_path == "text/analytics/v3.1-preview.1/entities/recognition/pii"
        assert "TextAnalytics-v3-1-Preview-1" in request.cognitive_service_doc

    def test_cost_is_one_text_record(self):
        request = text.sentiment(SAMPLE)

        assert request.cost.service == "Text API"
        assert request.cost.transactions == 1


class TestRequestsForVersion:
    def test_stable_lists_entity_linking_but_not_pii(self):
        paths = _paths(text.requests_for_version(SAMPLE, "en", text.STABLE_VERSION))

        assert paths == [
            "text/analytics/v3.0/sentiment",
            "text/analytics/v3.0/keyPhrases",
            "text/analytics/v3.0/entities/recognition/general",
            "text/analytics/v3.0/languages",
            "text/analytics/v3.0/entities/linking",
        ]

    def test_preview_adds_pii(self):
        paths = _paths(text.requests_for_version(SAMPLE, "en", text.PREVIEW_VERSION))

        assert len(paths) == 6
        assert paths[4] == "text/analytics/v3.1-preview.1/entities/linking"
        assert paths[5] == "text/analytics/v3.1-preview.1/entities/recognition/pii"

    def test_versions_differ_only_by_pii(self):
        def suffixes(version):
            return [
                path.split(f"text/analytics/{version}/")[1]
                for path in _paths(text.requests_for_version(SAMPLE, "en", version))
            ]

        stable = suffixes(text.STABLE_VERSION)
        preview = suffixes(text.PREVIEW_VERSION)

        assert "entities/linking" in stable and "entities/linking" in preview
        assert set(preview) - set(stable) == {"entities/recognition/pii"}
        assert set(stable) - set(preview) == set()

    def test_unknown_version_lists_core_operations(self):
        requests = text.requests_for_version(SAMPLE, "en", "v2.1")

        assert len(requests) == 4
