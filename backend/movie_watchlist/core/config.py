from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Movie Watchlist"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = False

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    DATA_FILE: Path = Path("data/movies.json")
    LOG_DIR: str = "logs"

    TMDB_READ_TOKEN: str | None = None
    TMDB_API_KEY: str | None = None
    TMDB_TIMEOUT_SECONDS: float = 10.0

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()  # type: ignore
