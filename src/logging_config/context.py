"""Log Context.

Binds engine-scoped fields (engine name, metric, etc.) to every log
record emitted inside a ``LogContext`` block, using contextvars so that
concurrent callers on different threads do not see each other's fields.
"""

from contextvars import ContextVar
from typing import Any

_context_var: ContextVar[dict] = ContextVar("log_context", default={})


def get_context_dict() -> dict[str, Any]:
    """Fields currently bound for log records."""
    return dict(_context_var.get())


class LogContext:
    """Context manager that binds key-value pairs to log records.

    Nested contexts merge with their parent and restore it on exit.

    Example:
        with LogContext(engine="primary"):
            logger.warning("alert raised")  # record carries engine=primary
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = _context_var.set({**_context_var.get(), **self.fields})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _context_var.reset(self._token)
            self._token = None
