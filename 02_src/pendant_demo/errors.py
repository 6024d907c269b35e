"""Exception types and helpers for reporting failed service calls."""

from collections.abc import Iterator
from contextlib import contextmanager

from .logging_config import get_logger

logger = get_logger(__name__)


class IllegalArgument(Exception):
    """The pendant/controller service rejected a call."""

    def __init__(self, msg: str = ""):
        super().__init__(msg)
        self.msg = msg


class ExtensionStartupError(RuntimeError):
    """Raised when the extension cannot register with the service."""


def exception_message(exc: BaseException) -> str:
    """Short 'ClassName:message' form of an exception."""
    name = type(exc).__name__
    if isinstance(exc, IllegalArgument):
        return f"{name}:{exc.msg}"
    message = str(exc)
    return f"{name}:{message}" if message else name


def describe_error(exc: BaseException) -> str:
    """'ClassName - message' form written back into error fields on the UI."""
    message = str(exc)
    name = type(exc).__name__
    return f"{name} - {message}" if message else name


@contextmanager
def log_and_continue(description: str) -> Iterator[None]:
    """Suppress a failure of a secondary call, leaving a WARNING record behind.

    Use only around calls whose failure must not mask the primary outcome,
    e.g. writing an error message back into a text field.
    """
    try:
        yield
    except Exception as e:
        logger.warning(
            "Suppressed failure while %s: %s",
            description,
            exception_message(e),
            extra={"context": {"suppressed": description}},
        )
