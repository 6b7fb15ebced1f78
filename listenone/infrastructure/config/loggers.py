import logging.config
from copy import deepcopy
from typing import Any
from typing import Final

from listenone.infrastructure.types import LogHandler
from listenone.infrastructure.types import LogLevel

LOGGER_LISTENONE: Final[str] = "listenone"

# Transport libraries are chatty at INFO: one line per request sent.
THIRD_PARTY_LEVELS: Final[dict[str, LogLevel]] = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

default_conf: Final[dict[str, Any]] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "message": {
            "format": "%(message)s",
        },
        "rich": {
            "format": "%(message)s",
            "datefmt": "[%X]",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
        # CLI commands print their results on stdout, so logs go to stderr.
        "cli": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "message",
            "stream": "ext://sys.stderr",
        },
        "cli_alert": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "message",
            "stream": "ext://sys.stderr",
        },
        "rich": {
            "class": "rich.logging.RichHandler",
            "formatter": "rich",
            "level": "NOTSET",
            # Playlist titles may contain square brackets.
            "markup": False,
            "rich_tracebacks": True,
            "show_path": False,
        },
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "loggers": {
        LOGGER_LISTENONE: {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        **{
            name: {"level": level, "handlers": ["console"], "propagate": False}
            for name, level in THIRD_PARTY_LEVELS.items()
        },
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"],
    },
}


def configure_loggers(level: LogLevel, handlers: list[LogHandler], propagate: bool = False) -> None:
    """Applies the logging configuration for a run.

    Only the `listenone` logger gets the requested level, third-party loggers
    keep their own. All the loggers, root included, share the given handlers.

    Args:
        level: The minimum level of the `listenone` logger (e.g. "INFO", "DEBUG").
        handlers: The handler names to attach (e.g. ["console"], ["rich"]).
        propagate: Whether `listenone` records also reach the root logger.
    """
    conf = deepcopy(default_conf)

    conf["loggers"][LOGGER_LISTENONE]["level"] = level
    conf["loggers"][LOGGER_LISTENONE]["propagate"] = propagate

    for logger_conf in conf["loggers"].values():
        logger_conf["handlers"] = handlers
    conf["root"]["handlers"] = handlers

    logging.config.dictConfig(conf)
