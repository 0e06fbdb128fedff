from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: str = "DEV"
    API_VERSION: str = "0.1.0"
    PORT: int = 3001
    CORS_ORIGINS: list[str] = ["*"]

    # JSON bodies carry base64 images, multipart uploads are capped separately
    MAX_REQUEST_SIZE: int = 50 * 1024 * 1024  # 50MB
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"
