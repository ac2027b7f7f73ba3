"""
Base class for service view models.

A view model holds the form state of one UI page, rebuilds request
descriptors from it, and sends them through the mediator. Results are kept
as raw JSON strings; failures are recovered into the `error` field and
never propagate to the UI.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from cognitive_explorer.models import CognitiveServiceConfig, Profile
from cognitive_explorer.services.mediator import (
    CognitiveServicesHttpError,
    ExecuteCognitiveServicesCommand,
    GetCurrentProfileQuery,
    Mediator,
)
from cognitive_explorer.services.requests.base import HttpRequest

logger = logging.getLogger(__name__)


class BaseViewModel(ABC):
    """
    Shared request execution and error formatting.

    Subclasses set `api_name` (used in error messages) and implement
    `_select_config` to pick their service configuration from the profile.
    """

    api_name: str = "Cognitive Services API"

    def __init__(self, mediator: Mediator):
        self._mediator = mediator
        self.error: str = ""
        self.config: Optional[CognitiveServiceConfig] = None
        self.is_available: bool = False
        self.requests: list[HttpRequest] = []

    @abstractmethod
    def _select_config(self, profile: Profile) -> Optional[CognitiveServiceConfig]:
        """Picks this view model's service configuration from the current profile."""
        pass

    async def on_initialized(self) -> None:
        await self.load_latest_config()

    async def load_latest_config(self) -> None:
        """Reloads the service configuration from the current profile."""
        profile = await self._mediator.send(GetCurrentProfileQuery())
        self.config = self._select_config(profile) if profile is not None else None
        self.is_available = self.config is not None and self.config.is_configured()
        logger.debug(f"{self.api_name} available: {self.is_available}")

    @staticmethod
    def parse_json(body: Optional[str]) -> Any:
        """Decodes a JSON result, returning None for empty or malformed bodies."""
        if not body:
            return None
        try:
            return json.loads(body)
        except json.JSONDecodeError:
            logger.warning("Response body is not valid JSON")
            return None

    def format_api_error(self, code: Optional[str], message: Optional[str]) -> str:
        return f"{self.api_name} error code {code}: \n{message}"

    async def make_request(self, request: Optional[HttpRequest]) -> Optional[str]:
        """
        Executes a request with the current configuration.

        Returns:
            Raw response body, or None when the request could not be made
            or failed. On failure `error` describes what went wrong.
        """
        self.error = ""
        if request is None:
            self.error = "Request is not set!"
            return None

        try:
            await self.load_latest_config()
            if not self.is_available:
                self.error = f"{self.api_name} configuration is not set\n"
                return None

            body = await self._mediator.send(ExecuteCognitiveServicesCommand(request=request, config=self.config))
            return body or ""

        except CognitiveServicesHttpError as e:
            payload = e.error_payload()
            if payload is not None and payload.error is not None:
                self.error = self.format_api_error(payload.error.code, payload.error.message)
            if not self.error.strip():
                self.error = str(e)
            return None

        except Exception as e:
            logger.exception(f"{self.api_name} request failed")
            self.error = str(e)
            return None
