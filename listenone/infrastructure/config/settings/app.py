from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from listenone import BASE_DIR
from listenone.domain.types import MusicProvider
from listenone.infrastructure.types import LogHandler
from listenone.infrastructure.types import LogLevel


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LISTENONE_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Lowers the default log level to DEBUG.
    DEBUG: bool = False

    LOG_LEVEL: LogLevel = "INFO"
    # CLI results are printed on stdout, logs go to stderr.
    LOG_HANDLERS: list[LogHandler] = ["cli"]

    # Provider used when an unknown provider name is given, unless strict.
    DEFAULT_PROVIDER: MusicProvider = MusicProvider.KUGOU
    STRICT_PROVIDER: bool = False

    TRACKS_MAX_CONCURRENCY: int = Field(default=10, ge=1)


app_settings = AppSettings()
