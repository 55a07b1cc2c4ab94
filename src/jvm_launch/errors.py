"""The single error type a launch can raise."""

from enum import Enum


class ErrorKind(Enum):
    EXECUTABLE_NOT_FOUND = "executable-not-found"
    LAUNCH_FAILED = "launch-failed"


class LaunchError(Exception):
    """Raised when the JVM cannot be started.

    ``cause`` is the underlying exception for LAUNCH_FAILED (also chained as
    ``__cause__``); it is None for EXECUTABLE_NOT_FOUND.
    """

    def __init__(self, kind: ErrorKind, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.kind = kind
        self.cause = cause
