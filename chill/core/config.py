from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pathlib import Path


class Settings(BaseSettings):
    """
    Application Configuration Settings.
    Values are loaded from environment variables prefixed with CHILL_ or a .env file.
    The media categories themselves live in CONFIG_FILE (see chill.core.categories).
    """

    # Category configuration file, read once at startup.
    # Relative paths are resolved against the working directory.
    CONFIG_FILE: Path = Path("config.cfg")

    # Interface and port the HTTP server listens on.
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Root log level, shared by the app loggers and uvicorn.
    # Case-insensitive; anything else is rejected when settings load.
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    class Config:
        """
        Pydantic configuration class.
        """
        env_prefix = "CHILL_"
        env_file = ".env"


# Create a globally accessible settings instance
settings = Settings()
