"""Logging configuration."""

import logging
import sys

from resource_api.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger from settings.

    Replaces any existing root handlers with a single stdout handler so
    repeated calls (e.g. app reloads in tests) do not duplicate output.
    SQLAlchemy engine logging stays governed by ``db_echo``.

    Args:
        settings: Application settings providing ``log_level``
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    # uvicorn's access log duplicates the request line; keep it at WARNING in prod
    if settings.is_production:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
