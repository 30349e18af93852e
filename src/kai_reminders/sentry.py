"""Sentry error tracking for the reminder service.

Usage:
    from kai_reminders.sentry import init_sentry
    init_sentry(dsn=settings.sentry_dsn, environment=settings.sentry_environment)

    # Report a handled failure without re-raising
    from kai_reminders.sentry import capture_exception
    try:
        store.create(record)
    except ReminderStoreError as e:
        capture_exception(e)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

if TYPE_CHECKING:
    from sentry_sdk._types import Event, Hint

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = frozenset(
    {
        "token",
        "api_key",
        "apikey",
        "secret",
        "password",
        "authorization",
        "bearer",
        "sentry_dsn",
        "original_message",
    }
)

_initialized = False


def init_sentry(
    dsn: str | None = None,
    environment: str = "production",
    release: str | None = None,
    traces_sample_rate: float = 0.1,
) -> bool:
    """Initialize Sentry SDK for error tracking.

    An empty DSN disables Sentry, which is the normal case in development.

    Returns:
        True if Sentry was initialized, False if skipped.
    """
    global _initialized

    if _initialized:
        logger.debug("Sentry already initialized")
        return True

    if not dsn:
        logger.info("No Sentry DSN configured, error tracking disabled")
        return False

    if release is None:
        try:
            from importlib.metadata import version

            release = f"kai-reminders@{version('kai-reminders')}"
        except Exception:
            release = "kai-reminders@unknown"

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        traces_sample_rate=traces_sample_rate,
        integrations=[
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        send_default_pii=False,
        attach_stacktrace=True,
        before_send=_before_send,
    )

    _initialized = True
    logger.info(f"Sentry initialized: environment={environment}, release={release}")
    return True


def _before_send(event: Event, hint: Hint) -> Event | None:
    """Scrub secrets and raw user text before events leave the process."""
    if "request" in event:
        _scrub_dict(cast(dict[str, Any], event["request"]))

    if "extra" in event:
        _scrub_dict(cast(dict[str, Any], event["extra"]))

    if "breadcrumbs" in event:
        breadcrumbs = cast(dict[str, Any], event["breadcrumbs"])
        for breadcrumb in breadcrumbs.get("values", []):
            if "data" in breadcrumb:
                _scrub_dict(breadcrumb["data"])

    return event


def _scrub_dict(data: dict[str, Any]) -> None:
    """Scrub sensitive keys from a dictionary in-place."""
    for key in list(data.keys()):
        if key.lower() in SENSITIVE_KEYS:
            data[key] = "[REDACTED]"
        elif isinstance(data[key], dict):
            _scrub_dict(data[key])


def capture_exception(error: BaseException, **extra: Any) -> str | None:
    """Report an exception to Sentry, with optional extra context.

    Returns:
        The Sentry event ID, or None if Sentry is not initialized.
    """
    if not _initialized:
        return None

    with sentry_sdk.new_scope() as scope:
        for key, value in extra.items():
            scope.set_extra(key, value)
        return sentry_sdk.capture_exception(error)


def flush(timeout: float = 2.0) -> None:
    """Flush pending Sentry events, e.g. before process exit."""
    if _initialized:
        sentry_sdk.flush(timeout=timeout)
