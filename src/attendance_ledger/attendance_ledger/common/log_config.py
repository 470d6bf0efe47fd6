from __future__ import annotations

import logging.config

# Top-level package name, whichever way the package was imported.
PACKAGE_LOGGER = __name__.rsplit(".", 2)[0]


def configure_logging(level: str = "INFO") -> None:
    """Console logging for the app and its feature modules."""

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "detailed": {
                    "format": "{asctime} {levelname} [{name}:{lineno}] {message}",
                    "style": "{",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "detailed",
                },
            },
            "loggers": {
                PACKAGE_LOGGER: {"handlers": ["console"], "level": level.upper(), "propagate": False},
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }
    )
