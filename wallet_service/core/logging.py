"""Root logging configuration."""

import logging

from wallet_service.core.config import Settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=settings.logging.format,
    )
    # SQL echo is controlled by DATABASE__ECHO, not by the root level.
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database.echo else logging.WARNING
    )
