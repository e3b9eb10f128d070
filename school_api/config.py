from typing import Optional

import structlog
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from school_api.database import build_database_url
from school_api.exceptions import ConfigurationError

logger = structlog.get_logger()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # App Settings
    ENVIRONMENT: str = "local"
    PROJECT_NAME: str = "School API"
    LOG_LEVEL: str = "INFO"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database Settings
    DB_TYPE: str
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_HOST: str = ""
    DB_PORT: Optional[int] = None
    DB_NAME: str
    DB_ECHO_QUERIES: bool = False

    @property
    def DATABASE_URI(self) -> URL:
        """Builds database URI from the DB_* settings."""
        return build_database_url(
            self.DB_TYPE,
            self.DB_USER,
            self.DB_PASSWORD,
            self.DB_HOST,
            self.DB_PORT,
            self.DB_NAME,
        )

    @classmethod
    def load_from_env_file(cls) -> "Settings":
        """Load settings from the environment, reading .env if it exists."""
        from pathlib import Path

        from dotenv import load_dotenv

        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file, override=True)

        try:
            return cls()
        except ValidationError as e:
            missing = [str(error["loc"][0]) for error in e.errors() if error["loc"]]
            logger.critical("Failed to load configuration", fields=missing)
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(missing) or 'unknown field'}",
                field=missing[0] if missing else None,
            ) from e


settings = Settings.load_from_env_file()
