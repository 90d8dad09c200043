from __future__ import annotations
import contextlib
import logging
import os
from typing import Optional, Protocol, Sequence

from .errors import FileOpenError, FileWriteError, NotifierError, TokenEncodeError
from .models import Invocation, NotifyResult, Status

"""Append a notification token to a shared log file.

Guardrails:
- The file is opened append-create and never truncated or read.
- Token bytes are written verbatim; no separator is ever added.
- No locking: concurrent writers interleave per the platform's O_APPEND rules.
"""

log = logging.getLogger(__name__)

_OPEN_FLAGS = os.O_WRONLY | os.O_APPEND | os.O_CREAT | getattr(os, "O_BINARY", 0)


class Appender(Protocol):
    def append(self, path: str, data: bytes) -> int:
        """Append ``data`` to ``path``; raise FileOpenError / FileWriteError."""
        ...


class FileAppender:
    """Appender backed by the real filesystem."""

    def __init__(self, mode: int = 0o666):
        self.mode = mode

    def append(self, path: str, data: bytes) -> int:
        try:
            fd = os.open(path, _OPEN_FLAGS, self.mode)
        except (OSError, ValueError) as e:
            # ValueError covers embedded NULs and paths the fs encoding rejects
            raise FileOpenError(path, e) from e
        written = 0
        try:
            view = memoryview(data)
            while written < len(view):
                # short writes are rare but legal for regular files
                written += os.write(fd, view[written:])
        except OSError as e:
            with contextlib.suppress(OSError):
                os.close(fd)
            raise FileWriteError(path, e) from e
        try:
            os.close(fd)
        except OSError as e:
            raise FileWriteError(path, e) from e
        return written


def append_token(path: str, token: str, appender: Optional[Appender] = None) -> int:
    """Append ``token`` to the file at ``path`` and return the byte count."""
    inv = Invocation(path=path, token=token)
    app = appender or FileAppender()
    try:
        payload = inv.payload
    except UnicodeEncodeError as e:
        raise TokenEncodeError(path, e) from e
    n = app.append(inv.path, payload)
    log.debug("appended %d bytes to %s: %r", n, inv.path, inv.token)
    return n


def notify(
    args: Sequence[str],
    prog: str = "notifier",
    appender: Optional[Appender] = None,
) -> NotifyResult:
    """Run one notification and return a tagged result; never touches stdio."""
    try:
        inv = Invocation.from_args(args, prog)
        if len(args) > 2:
            log.debug("ignoring %d extra argument(s)", len(args) - 2)
        n = append_token(inv.path, inv.token, appender)
    except NotifierError as e:
        log.debug("notify failed (%s): %s", e.status.value, e.message)
        return NotifyResult(
            status=e.status, exit_code=e.exit_code, path=e.path, message=e.message
        )
    return NotifyResult(status=Status.OK, exit_code=0, path=inv.path, bytes_written=n)
