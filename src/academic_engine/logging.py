"""Engine logging: one rich handler on stderr, plus session/operation context.

Every `ContentEngine` call runs inside `engine_context`, so records emitted by the managers and
stores underneath it carry `session` (the engine instance) and `op` (the facade call, or a finer
step set with `set_operation`).
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler

HANDLER_NAME = "academic_engine"
LOG_FORMAT = "session=%(session)s op=%(op)s %(name)s: %(message)s"
NO_CONTEXT = "-"

# chatty HTTP loggers used underneath the openai SDK
_QUIET_LOGGERS = ("openai", "httpx", "httpcore")

_session: contextvars.ContextVar[str] = contextvars.ContextVar("academic_engine_session", default=NO_CONTEXT)
_operation: contextvars.ContextVar[str] = contextvars.ContextVar("academic_engine_op", default=NO_CONTEXT)


class ContextFilter(logging.Filter):
    """Stamp records with the current engine session and operation."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.session = _session.get()  # type: ignore[attr-defined]
        record.op = _operation.get()  # type: ignore[attr-defined]
        return True


def current_context() -> dict[str, str]:
    return {"session": _session.get(), "op": _operation.get()}


@contextlib.contextmanager
def engine_context(*, session: str, op: str | None = None) -> Iterator[None]:
    """Bind `session` and `op` for the duration of one engine call.

    Nested contexts inherit the enclosing operation when `op` is omitted. Changes made with
    `set_operation` inside the block are undone on exit.
    """

    session_token = _session.set(session)
    op_token = _operation.set(op or _operation.get())
    try:
        yield
    finally:
        _operation.reset(op_token)
        _session.reset(session_token)


def set_operation(op: str) -> None:
    """Name the current step of the running engine call."""

    _operation.set(op)


def configure_logging(level: str = "INFO") -> None:
    """Install the engine's rich handler on the root logger.

    Calling this again swaps the previous engine handler out instead of stacking another one.
    """

    # stderr keeps CLI stdout clean for JSON output
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        show_path=False,
    )
    handler.set_name(HANDLER_NAME)
    handler.addFilter(ContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, root.level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log the active exception, appending `key=value` pairs when given."""

    if not context:
        logger.exception("%s", msg)
        return
    details = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
    logger.exception("%s [%s]", msg, details)
