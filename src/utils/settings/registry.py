"""Vessel registry settings configuration."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistrySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    MARINETRAFFIC_API_KEY: SecretStr | None = None
    MARINETRAFFIC_BASE_URL: str = "https://services.marinetraffic.com/api"

    VESSELFINDER_API_KEY: SecretStr | None = None
    VESSELFINDER_BASE_URL: str = "https://api.vesselfinder.com"

    REGISTRY_TIMEOUT: int = 15
