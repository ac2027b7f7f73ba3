"""
Secret Manager with hybrid authentication.

Supports two modes:
- LOCAL: Reads service keys from environment variables (.env file)
- CLOUD: Uses Azure Managed Identity to fetch keys from Key Vault

Security Note: Using DefaultAzureCredential ensures zero hardcoded subscription
keys in production. The credential chain automatically selects the best auth method.
"""

import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment-based configuration.

    In LOCAL mode: reads from .env file
    In CLOUD mode: Key Vault values override the key defaults
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment mode
    env: str = "LOCAL"
    log_level: str = "INFO"

    # Profile store
    database_url: str = "sqlite:///./cognitive_explorer.db"

    # Outbound HTTP
    http_timeout: float = 30.0

    # Default profile seeded into an empty profile store
    default_profile_name: str = "default"
    face_api_base_url: str = ""
    face_api_key: str = ""
    text_api_base_url: str = ""
    text_api_key: str = ""

    # Azure Key Vault (for CLOUD mode)
    azure_keyvault_url: str = ""

    @property
    def is_local(self) -> bool:
        return self.env.upper() == "LOCAL"


@lru_cache()
def get_settings() -> Settings:
    """
    Returns cached application settings.

    Uses LRU cache to avoid re-reading env vars on every call.
    """
    return Settings()


def configure_logging() -> None:
    """Configures root logging from LOG_LEVEL. Safe to call more than once."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def get_secret(secret_name: str) -> Optional[str]:
    """
    Retrieves a secret value based on environment mode.

    Args:
        secret_name: Name of the secret to retrieve

    Returns:
        Secret value or None if not found

    Security Note:
        - LOCAL mode: Returns environment variable (for development only)
        - CLOUD mode: Uses Managed Identity to fetch from Key Vault
    """
    settings = get_settings()

    if settings.is_local:
        return os.environ.get(secret_name)

    # DefaultAzureCredential tries environment variables, Managed Identity
    # and Azure CLI credentials in that order.
    from azure.identity import DefaultAzureCredential
    from azure.keyvault.secrets import SecretClient

    if not settings.azure_keyvault_url:
        raise ValueError("AZURE_KEYVAULT_URL must be set in CLOUD mode")

    credential = DefaultAzureCredential()
    client = SecretClient(
        vault_url=settings.azure_keyvault_url,
        credential=credential
    )

    try:
        secret = client.get_secret(secret_name)
        return secret.value
    except Exception as e:
        # Do not expose vault details to the caller
        raise RuntimeError(f"Failed to retrieve secret '{secret_name}'") from e


def get_face_api_key() -> str:
    """Retrieves the Face API subscription key from the appropriate source."""
    settings = get_settings()

    if settings.is_local:
        return settings.face_api_key

    api_key = get_secret("FACE-API-KEY")
    if not api_key:
        raise ValueError("FACE-API-KEY not found in Key Vault")
    return api_key


def get_text_api_key() -> str:
    """Retrieves the Text Analytics subscription key from the appropriate source."""
    settings = get_settings()

    if settings.is_local:
        return settings.text_api_key

    api_key = get_secret("TEXT-API-KEY")
    if not api_key:
        raise ValueError("TEXT-API-KEY not found in Key Vault")
    return api_key
