from __future__ import annotations
import os
from enum import Enum
from typing import Optional, Sequence
from pydantic import BaseModel, ConfigDict


class Status(str, Enum):
    OK = "ok"
    USAGE_ERROR = "usage_error"
    OPEN_ERROR = "open_error"
    WRITE_ERROR = "write_error"
    ENCODE_ERROR = "encode_error"


class Invocation(BaseModel):
    """The two positional values a notifier run is given.

    Neither value is validated beyond being a string: empty paths fail later at
    open time and empty tokens append nothing.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    path: str
    token: str

    @classmethod
    def from_args(cls, args: Sequence[str], prog: str) -> "Invocation":
        """Build from argv minus the program name; extra values are ignored."""
        from .errors import UsageError

        if len(args) < 2:
            raise UsageError(prog)
        return cls(path=args[0], token=args[1])

    @property
    def payload(self) -> bytes:
        # fsencode undoes surrogateescape, so argv bytes come back unchanged
        return os.fsencode(self.token)


class NotifyResult(BaseModel):
    status: Status
    exit_code: int
    path: Optional[str] = None
    bytes_written: int = 0
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK
