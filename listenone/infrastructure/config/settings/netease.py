from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from listenone import BASE_DIR


class NeteaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NETEASE_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    HTTP_TIMEOUT: float = 30.0
    HTTP_MAX_ATTEMPTS: int = Field(default=3, ge=1)

    USER_AGENT: str = (
        "Mozilla/5.0 (iPhone; CPU iPhone OS 14_3 like Mac OS X) "
        "AppleWebKit/534.30 (KHTML, like Gecko) Version/4.0 Mobile Safari/534.30"
    )

    PLAYLIST_PAGE_LIMIT: int = 35
    PLAYLIST_ORDER: str = "hot"

    SONG_DETAIL_CHUNK_SIZE: int = Field(default=500, ge=1)


netease_settings = NeteaseSettings()
