from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_TITLE: str = "News API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "API для получения новостных статей"

    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 8000
    RELOAD: bool = False

    # Источник для тестовых статей
    SAMPLE_SOURCE_URL: str = "http://example.com"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
