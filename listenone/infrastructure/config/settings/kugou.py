from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from listenone import BASE_DIR


class KugouSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="KUGOU_",
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

    # Fixed by the provider, the listing endpoint doesn't accept any page size.
    PLAYLIST_PAGE_SIZE: int = 30


kugou_settings = KugouSettings()
