"""Application settings loaded from environment variables."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """Travel chat configuration. All values come from environment variables."""

    # Backend (NLU parser + command executor share one base address)
    backend_url: str = Field(default="http://localhost:8000")
    backend_timeout_seconds: float = Field(default=30.0, gt=0)

    # Conversation copy
    greeting_text: str = Field(
        default="Hi! I can help with flights, hotels, cars, and packages. What do you need?"
    )
    failure_text: str = Field(default="Something went wrong. Please try again.")

    # HTTP front-end
    web_host: str = Field(default="127.0.0.1")
    web_port: int = Field(default=8080)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    def backend_endpoint(self, path: str) -> str:
        """Join BACKEND_URL and an endpoint path, tolerating trailing slashes."""
        return f"{self.backend_url.rstrip('/')}/{path.lstrip('/')}"


settings = Settings()
