"""Logging setup for the application."""

import logging

from debt_ledger.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger once at startup.

    Modules log through logging.getLogger(__name__) and inherit
    this configuration.
    """
    resolved = level or get_settings().LOG_LEVEL
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("debt_ledger").setLevel(resolved)
