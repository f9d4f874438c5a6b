# movie_api/core/logging.py
import logging
import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Route the application's and uvicorn's loggers through one console handler.
    """
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "movie_api": {"level": level.upper()},
            "uvicorn.access": {"level": "WARNING"},
        },
        "root": {"handlers": ["console"], "level": level.upper()},
    })
    logging.captureWarnings(True)
