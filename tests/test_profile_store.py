"""Tests for the SQLModel-backed profile store."""

from datetime import timezone

import pytest
from pydantic import ValidationError

from cognitive_explorer.models import CognitiveServiceConfig, Profile, ProfileCreate, utcnow
from cognitive_explorer.services.profile_store import ProfileStore, seed_default_profile

from tests.conftest import FACE_ENDPOINT, TEXT_ENDPOINT


def _data(name: str, **overrides) -> ProfileCreate:
    fields = {
        "name": name,
        "face_base_url": FACE_ENDPOINT,
        "face_key": "face-secret",
        "text_base_url": TEXT_ENDPOINT,
        "text_key": "text-secret",
    }
    fields.update(overrides)
    return ProfileCreate(**fields)


class TestProfileStore:
    def test_first_profile_becomes_current(self, session_factory):
        with session_factory() as session:
            store = ProfileStore(session)
            store.save(_data("westeurope"))
            store.save(_data("eastus"))

            assert store.get_current().name == "westeurope"
            assert [p.name for p in store.list_profiles()] == ["eastus", "westeurope"]

    def test_save_replaces_existing(self, session_factory):
        with session_factory() as session:
            store = ProfileStore(session)
            store.save(_data("westeurope"))
            store.save(_data("westeurope", text_key="  rotated  "))

            profiles = store.list_profiles()
            assert len(profiles) == 1
            assert profiles[0].text_key == "rotated"

    def test_select_keeps_one_current(self, session_factory):
        with session_factory() as session:
            store = ProfileStore(session)
            store.save(_data("westeurope"))
            store.save(_data("eastus"))

            store.select("eastus")

            current = [p.name for p in store.list_profiles() if p.is_current]
            assert current == ["eastus"]

    def test_select_unknown_raises(self, session_factory):
        with session_factory() as session:
            with pytest.raises(LookupError):
                ProfileStore(session).select("nowhere")

    def test_deleting_current_promotes_next(self, session_factory):
        with session_factory() as session:
            store = ProfileStore(session)
            store.save(_data("westeurope"))
            store.save(_data("eastus"))

            store.delete("westeurope")

            assert store.get_current().name == "eastus"

    def test_deleting_last_profile_empties_store(self, session_factory):
        with session_factory() as session:
            store = ProfileStore(session)
            store.save(_data("westeurope"))

            store.delete("westeurope")

            assert store.get_current() is None
            with pytest.raises(LookupError):
                store.delete("westeurope")


class TestProfileModels:
    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            ProfileCreate(name="   ")

    def test_timestamps_are_timezone_aware(self):
        profile = Profile(name="westeurope")

        assert profile.created_at.tzinfo is timezone.utc
        assert profile.updated_at.tzinfo is timezone.utc
        assert utcnow().utcoffset().total_seconds() == 0

    def test_configs_follow_base_urls(self, profile):
        assert profile.text_api_config == CognitiveServiceConfig(base_url=TEXT_ENDPOINT, key="text-secret")

        profile.face_base_url = ""
        assert profile.face_api_config is None

    @pytest.mark.parametrize(
        "base_url,key,expected",
        [
            (FACE_ENDPOINT, "secret", True),
            (FACE_ENDPOINT, "   ", False),
            ("westeurope.api.cognitive.microsoft.com", "secret", False),
            ("", "secret", False),
        ],
    )
    def test_is_configured(self, base_url, key, expected):
        assert CognitiveServiceConfig(base_url=base_url, key=key).is_configured() is expected

    def test_build_url_joins_with_single_slash(self):
        config = CognitiveServiceConfig(base_url=TEXT_ENDPOINT, key="k")

        assert config.build_url("/text/analytics/v3.0/sentiment") == (
            "https://westeurope.api.cognitive.microsoft.com/text/analytics/v3.0/sentiment"
        )


class TestSeedDefaultProfile:
    def test_seeds_from_settings(self, session_factory, monkeypatch):
        monkeypatch.setenv("ENV", "LOCAL")
        monkeypatch.setenv("TEXT_API_BASE_URL", TEXT_ENDPOINT)
        monkeypatch.setenv("TEXT_API_KEY", "text-secret")
        monkeypatch.setenv("DEFAULT_PROFILE_NAME", "from-env")

        with session_factory() as session:
            seeded = seed_default_profile(session)

            assert seeded.name == "from-env"
            assert seeded.is_current
            assert seeded.text_key == "text-secret"
            assert seeded.face_base_url == ""

    def test_does_not_seed_non_empty_store(self, session_factory, monkeypatch):
        monkeypatch.setenv("TEXT_API_BASE_URL", TEXT_ENDPOINT)

        with session_factory() as session:
            ProfileStore(session).save(_data("existing"))

            assert seed_default_profile(session) is None
            assert len(ProfileStore(session).list_profiles()) == 1

    def test_does_not_seed_without_endpoints(self, session_factory, monkeypatch):
        monkeypatch.setenv("FACE_API_BASE_URL", "")
        monkeypatch.setenv("TEXT_API_BASE_URL", "")

        with session_factory() as session:
            assert seed_default_profile(session) is None
