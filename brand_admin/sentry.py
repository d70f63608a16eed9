import sentry_sdk
import structlog

from brand_admin.settings import Settings

logger = structlog.get_logger(__name__)


def setup_sentry(settings: Settings) -> bool:
    """Initialise Sentry when a DSN is configured. Returns whether it was enabled."""
    if not settings.SENTRY.DSN:
        logger.debug("Sentry DSN not configured, error reporting disabled")
        return False
    sentry_sdk.init(
        dsn=settings.SENTRY.DSN,
        environment=settings.ENVIRONMENT,
        release=f"{settings.APP_NAME}@{settings.APP_VERSION}",
        send_default_pii=settings.SENTRY.SEND_DEFAULT_PII,
        traces_sample_rate=settings.SENTRY.TRACES_SAMPLE_RATE,
    )
    return True
