import logging
from logging import config as logging_config


class ColoredFormatter(logging.Formatter):
    """Logging formatter that colors the levelname with ANSI codes."""

    COLOR_MAP = {
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[41m",
    }
    RESET = "\x1b[0m"

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        color = self.COLOR_MAP.get(original_levelname, "")
        record.levelname = f"{color}{original_levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def configure_logging(level: str = "INFO") -> None:
    """Send photoview, uvicorn and httpx logs to stdout with colored levels."""

    default_fmt = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    cfg = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"()": "photoview.logging_config.ColoredFormatter", "format": default_fmt, "datefmt": datefmt},
        },
        "handlers": {
            "default": {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            "photoview": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            # httpx logs every request at INFO
            "httpx": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "httpcore": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        },
        "root": {"handlers": ["default"], "level": level},
    }

    logging_config.dictConfig(cfg)


__all__ = ["configure_logging", "ColoredFormatter"]
