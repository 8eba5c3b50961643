"""
Logging infrastructure.

Modules log through `logging.getLogger(__name__)`; the process entry point
calls `configure_logging` once so every record goes to the root handler.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for an application process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
