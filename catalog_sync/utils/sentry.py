"""Sentry initialization and error capture helpers."""

import inspect
import logging
import os
from typing import Dict, Any, Optional
from functools import wraps

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

logger = logging.getLogger(__name__)

def init_sentry(
    dsn: Optional[str] = None,
    environment: str = "development",
    traces_sample_rate: float = 1.0,
    profiles_sample_rate: float = 1.0,
) -> bool:
    """Initialize Sentry SDK.
    
    Args:
        dsn: Sentry DSN. If not provided, will try to get from SENTRY_DSN env var
        environment: Environment name (development, production, etc.)
        traces_sample_rate: Sample rate for performance monitoring
        profiles_sample_rate: Sample rate for profiling

    Returns:
        True if the SDK was initialized.
    """
    if os.getenv('DISABLE_SENTRY', '').lower() in ('true', '1', 'yes'):
        logger.info("Sentry is disabled via DISABLE_SENTRY environment variable")
        return False
    
    dsn = dsn or os.getenv('SENTRY_DSN')
    if not dsn:
        logger.debug("Sentry DSN not provided, skipping Sentry initialization")
        return False

    logging_integration = LoggingIntegration(
        level=logging.INFO,        # Capture info and above as breadcrumbs
        event_level=logging.ERROR  # Send errors as events
    )

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        integrations=[logging_integration],
        traces_sample_rate=traces_sample_rate,
        profiles_sample_rate=profiles_sample_rate,
        send_default_pii=False,
        max_breadcrumbs=50,
        attach_stacktrace=True,
        release=os.getenv('RELEASE_VERSION', 'development'),
    )

    logger.info(f"Sentry initialized for environment: {environment}")
    return True

def capture_error(error: Exception, extra_data: Optional[Dict[str, Any]] = None) -> None:
    """Capture an error with additional context.
    
    Args:
        error: The exception to capture
        extra_data: Additional context data to attach to the error
    """
    if extra_data:
        with sentry_sdk.push_scope() as scope:
            for key, value in extra_data.items():
                scope.set_extra(key, value)
            sentry_sdk.capture_exception(error)
    else:
        sentry_sdk.capture_exception(error)

def add_breadcrumb(
    message: str,
    category: Optional[str] = None,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None
) -> None:
    sentry_sdk.add_breadcrumb(
        message=message,
        category=category,
        level=level,
        data=data
    )

def monitor_errors(func):
    """Decorator to capture errors raised by ``func`` in Sentry and re-raise them.

    Works for both regular functions and coroutine functions.
    """
    def _extra(args, kwargs) -> Dict[str, Any]:
        return {
            'function': func.__name__,
            'args': repr(args),
            'kwargs': repr(kwargs)
        }

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                capture_error(e, _extra(args, kwargs))
                raise
        return async_wrapper

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            capture_error(e, _extra(args, kwargs))
            raise
    return wrapper
