"""Text Analytics view model."""

import logging
from typing import Optional

from cognitive_explorer.models import CognitiveServiceConfig, Profile
from cognitive_explorer.services.mediator import Mediator
from cognitive_explorer.services.requests import text as text_requests
from cognitive_explorer.services.viewmodels.base import BaseViewModel

logger = logging.getLogger(__name__)

DEFAULT_TEXT = (
    "Cognitive Services and Streamlit are awesome technologies! "
    "Streamlit needs a bit more polishing. Despite that, I love it! 😁"
)


class TextViewModel(BaseViewModel):
    """
    State of the Text Analytics page.

    Holds the input text, language and API version, and the raw JSON
    result of each operation.
    """

    api_name = "Text API"

    def __init__(self, mediator: Mediator):
        super().__init__(mediator)
        self.text: str = DEFAULT_TEXT
        self.language: str = text_requests.DEFAULT_LANGUAGE
        self._text_api_version: str = text_requests.STABLE_VERSION

        self.sentiment_json: Optional[str] = ""
        self.key_phrase_json: Optional[str] = ""
        self.entities_json: Optional[str] = ""
        self.detect_language_json: Optional[str] = ""
        self.entity_linking_json: Optional[str] = ""
        self.entity_recognition_pii_json: Optional[str] = ""

        self.update_requests()

    def _select_config(self, profile: Profile) -> Optional[CognitiveServiceConfig]:
        return profile.text_api_config

    @property
    def is_text_api_available(self) -> bool:
        return self.is_available

    @property
    def text_api_version(self) -> str:
        return self._text_api_version

    @text_api_version.setter
    def text_api_version(self, value: str) -> None:
        if self._text_api_version == value:
            return

        self._text_api_version = value

        # Outputs of different versions are not comparable
        self.sentiment_json = ""
        self.key_phrase_json = ""
        self.entities_json = ""
        self.detect_language_json = ""
        self.entity_linking_json = ""
        self.entity_recognition_pii_json = ""

        self.update_requests()

    @property
    def is_stable_api(self) -> bool:
        return self._text_api_version == text_requests.STABLE_VERSION

    @property
    def is_preview_api(self) -> bool:
        return self._text_api_version == text_requests.PREVIEW_VERSION

    def update_requests(self) -> None:
        """Rebuilds the request previews from the current form fields."""
        self._sentiment = text_requests.sentiment(self.text, self.language, self._text_api_version)
        self._key_phrases = text_requests.key_phrases(self.text, self.language, self._text_api_version)
        self._entities = text_requests.entities(self.text, self.language, self._text_api_version)
        self._detect_language = text_requests.detect_language(self.text, self.language, self._text_api_version)
        self._entity_linking = text_requests.entity_linking(self.text, self.language, self._text_api_version)
        self._entity_recognition_pii = text_requests.entity_recognition_pii(self.text, self.language)

        self.requests = text_requests.requests_for_version(self.text, self.language, self._text_api_version)

    async def sentiment_analysis(self) -> None:
        self.update_requests()
        self.sentiment_json = await self.make_request(self._sentiment)

    async def key_phrases_analysis(self) -> None:
        self.update_requests()
        self.key_phrase_json = await self.make_request(self._key_phrases)

    async def entities_analysis(self) -> None:
        self.update_requests()
        self.entities_json = await self.make_request(self._entities)

    async def detect_language(self) -> None:
        self.update_requests()
        self.detect_language_json = await self.make_request(self._detect_language)

    async def entity_linking(self) -> None:
        self.update_requests()
        self.entity_linking_json = await self.make_request(self._entity_linking)

    async def entity_recognition_pii(self) -> None:
        self.update_requests()
        self.entity_recognition_pii_json = await self.make_request(self._entity_recognition_pii)

    # Operation name -> coroutine method, used by the REST API and the UI
    OPERATIONS = {
        "sentiment": "sentiment_analysis",
        "key-phrases": "key_phrases_analysis",
        "entities": "entities_analysis",
        "languages": "detect_language",
        "entity-linking": "entity_linking",
        "pii": "entity_recognition_pii",
    }

    RESULT_FIELDS = {
        "sentiment": "sentiment_json",
        "key-phrases": "key_phrase_json",
        "entities": "entities_json",
        "languages": "detect_language_json",
        "entity-linking": "entity_linking_json",
        "pii": "entity_recognition_pii_json",
    }

    async def run_operation(self, operation: str) -> Optional[str]:
        """
        Runs an operation by its short name and returns its JSON result.

        Raises:
            LookupError: Unknown operation name
        """
        method_name = self.OPERATIONS.get(operation)
        if method_name is None:
            raise LookupError(f"Unknown Text API operation: {operation}")

        await getattr(self, method_name)()
        return getattr(self, self.RESULT_FIELDS[operation])
