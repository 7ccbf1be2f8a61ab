"""Sentry error reporting.

Reporting is observability only: nothing here raises or changes what a
handler returns.
"""

import os
import logging

import sentry_sdk

logger = logging.getLogger(__name__)

_initialized = False


def init_error_tracking() -> bool:
    """Initialise the Sentry SDK once per process when SENTRY_DSN is set."""
    global _initialized

    if _initialized:
        return True

    dsn = os.environ.get("SENTRY_DSN", "").strip()
    if not dsn:
        logger.debug("SENTRY_DSN not set, error tracking disabled")
        return False

    try:
        sentry_sdk.init(
            dsn=dsn,
            environment=os.environ.get("SENTRY_ENVIRONMENT", "production"),
            traces_sample_rate=float(os.environ.get("SENTRY_TRACES_SAMPLE_RATE", "0")),
            send_default_pii=False,
        )
    except Exception as e:
        logger.warning(f"Failed to initialise Sentry: {e}")
        return False

    _initialized = True
    logger.info("Sentry error tracking initialised")
    return True


def capture_exception(error: BaseException) -> None:
    """Report an exception to Sentry if tracking is enabled."""
    if not _initialized:
        return
    try:
        sentry_sdk.capture_exception(error)
    except Exception as e:
        logger.warning(f"Failed to report exception to Sentry: {e}")
