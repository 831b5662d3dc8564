import logging
import contextvars
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

# Context variable carrying the correlation ID of the current unit of work
# (an onboarding run, a reveal request, ...)
correlation_id_context = contextvars.ContextVar('correlation_id', default=None)


class ContextAwareLogger:
    """
    A logger wrapper that automatically includes the correlation ID.

    Callers never pass the ID around by hand; whatever is set in the
    current context is attached to every record as ``correlation_id``.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.name = name

    def _log_with_context(self, level: int, msg: str, *args, **kwargs):
        correlation_id = kwargs.pop('correlation_id', None) or correlation_id_context.get()

        if correlation_id:
            extra = kwargs.get('extra', {})
            extra['correlation_id'] = correlation_id
            kwargs['extra'] = extra

        self.logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        self._log_with_context(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._log_with_context(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._log_with_context(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._log_with_context(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        self._log_with_context(logging.ERROR, msg, *args, **kwargs, exc_info=True)


def get_logger(name: str) -> ContextAwareLogger:
    """
    Get a context-aware logger for the specified name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextAwareLogger: A logger that automatically includes the correlation ID
    """
    return ContextAwareLogger(name)


def get_correlation_id() -> Optional[str]:
    return correlation_id_context.get()


@contextmanager
def correlation_scope(correlation_id: Optional[str] = None) -> Iterator[str]:
    """
    Tag every log record emitted inside the block with one correlation ID.

    Nested scopes reuse the outer ID so a finder run triggered by onboarding
    logs under the onboarding ID.
    """
    current = correlation_id_context.get()
    if current and correlation_id is None:
        yield current
        return
    token = correlation_id_context.set(correlation_id or uuid.uuid4().hex)
    try:
        yield correlation_id_context.get()
    finally:
        correlation_id_context.reset(token)
