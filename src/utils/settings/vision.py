"""Google Cloud Vision settings configuration."""

from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class VisionSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    GOOGLE_VISION_API_KEY: SecretStr | None = None
    # File holding the API key on its first line, checked when no key is set
    GOOGLE_VISION_KEY_FILE: str = "./google-credentials.key"
    GOOGLE_VISION_URL: str = "https://vision.googleapis.com/v1/images:annotate"
    GOOGLE_VISION_TIMEOUT: int = 30

    def resolve_api_key(self) -> str | None:
        """Return the configured API key, or None when the classifier is not set up."""
        if self.GOOGLE_VISION_API_KEY is not None:
            key = self.GOOGLE_VISION_API_KEY.get_secret_value().strip()
            if key:
                return key

        key_file = Path(self.GOOGLE_VISION_KEY_FILE)
        if not key_file.is_file():
            return None

        lines = key_file.read_text(encoding="utf-8").splitlines()
        if not lines or not lines[0].strip():
            return None
        return lines[0].strip()
