import logging
import logging.config
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Logger written to by LoggingMiddleware; one line per handled request
REQUEST_LOGGER = "app.core.logging_middleware"


def _rotating_file(log_dir: str, filename: str, level: str) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": "standard",
        "filename": os.path.join(log_dir, filename),
        "maxBytes": MAX_LOG_BYTES,
        "backupCount": LOG_BACKUPS,
        "encoding": "utf-8",
    }


def setup_logging(log_dir: str = "logs", environment: str = "development"):
    """
    Configure logging for the API process.

    - ``app.log``: everything the application logs at INFO and above
    - ``errors.log``: ERROR and above from any logger
    - ``requests.log``: the request access lines from LoggingMiddleware

    uvicorn's own access log is quieted since the middleware already records
    each request with its duration. Application loggers go to DEBUG in
    development.
    """
    os.makedirs(log_dir, exist_ok=True)
    app_level = "DEBUG" if environment == "development" else "INFO"

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": app_level,
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
            "app_file": _rotating_file(log_dir, "app.log", "INFO"),
            "error_file": _rotating_file(log_dir, "errors.log", "ERROR"),
            "request_file": _rotating_file(log_dir, "requests.log", "INFO"),
        },
        "loggers": {
            "": {"level": "WARNING", "handlers": ["console", "error_file"]},
            "app": {
                "level": app_level,
                "handlers": ["console", "app_file", "error_file"],
                "propagate": False,
            },
            REQUEST_LOGGER: {
                "level": "INFO",
                "handlers": ["console", "request_file", "error_file"],
                "propagate": False,
            },
            "slowapi": {"level": "WARNING"},
            "uvicorn.error": {"level": "INFO", "handlers": ["console", "app_file"], "propagate": False},
            "uvicorn.access": {"level": "WARNING"},
            # SQL echo only when explicitly raised to INFO
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    })

    logger = logging.getLogger("app.core.logging_config")
    logger.info(f"Logging initialized ({environment}), writing to {os.path.abspath(log_dir)}")
