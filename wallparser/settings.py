from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class WallParserSettings(BaseSettings):
    """
    Environment-driven settings for page fetching, crawling and the HTTP API.
    """

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    # ---- Fetching ----
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/115.0.0.0 Safari/537.36"
        ),
        alias="WALL_USER_AGENT",
    )
    request_timeout_sec: float = Field(default=15.0, alias="WALL_REQUEST_TIMEOUT_SEC")

    # The wall is served in a legacy single-byte Cyrillic encoding, not UTF-8.
    source_encoding: str = Field(default="windows-1251", alias="WALL_SOURCE_ENCODING")

    # ---- Crawling ----
    post_delay_sec: float = Field(default=5.0, alias="WALL_POST_DELAY_SEC")

    # JSON list in the environment, e.g. WALL_KEYWORDS='["посадка", "субботник"]'
    keywords: list[str] = Field(default_factory=list, alias="WALL_KEYWORDS")
    stemmer_language: str = Field(default="russian", alias="WALL_STEMMER_LANGUAGE")

    # ---- Entry points ----
    host: str = Field(default="0.0.0.0", alias="WALL_HOST")
    port: int = Field(default=3000, alias="WALL_PORT")
    default_url: str = Field(default="", alias="WALL_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


def load_settings() -> WallParserSettings:
    return WallParserSettings()
