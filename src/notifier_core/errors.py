from __future__ import annotations
import os
from typing import Optional

from .models import Status


def _describe(exc: Exception) -> str:
    if isinstance(exc, OSError):
        if exc.strerror:
            return exc.strerror
        if exc.errno:
            return os.strerror(exc.errno)
    return str(exc)


class NotifierError(Exception):
    """Base class for failures that end a single notifier invocation."""

    status: Status = Status.USAGE_ERROR
    exit_code: int = 1

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class UsageError(NotifierError):
    status = Status.USAGE_ERROR

    def __init__(self, prog: str):
        super().__init__(f"usage: {prog} <filename> <hash>")
        self.prog = prog


class FileOpenError(NotifierError):
    status = Status.OPEN_ERROR

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"error opening file {path}: {_describe(cause)}", path)
        self.cause = cause


class FileWriteError(NotifierError):
    status = Status.WRITE_ERROR

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"error writing file {path}: {_describe(cause)}", path)
        self.cause = cause


class TokenEncodeError(NotifierError):
    """The token holds characters the filesystem encoding cannot represent."""

    status = Status.ENCODE_ERROR

    def __init__(self, path: str, cause: UnicodeEncodeError):
        super().__init__(f"error encoding hash for file {path}: {cause.reason}", path)
        self.cause = cause
