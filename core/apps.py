"""Django application configuration for core."""

from django.apps import AppConfig
from django.conf import settings

import structlog

logger = structlog.get_logger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Connect signal handlers and configure logging."""
        import core.signals  # noqa: PLC0415

        del core.signals

        if not getattr(settings, "TEST_MODE", False):
            from core.logging import setup_logging  # noqa: PLC0415

            setup_logging()
        logger.info("Core app ready")
