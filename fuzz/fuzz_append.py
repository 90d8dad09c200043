"""Fuzz harness for the notify operation.

Arbitrary bytes are split into a path and a sequence of tokens; each token is
appended through an in-memory appender and the accumulated content must equal
the in-order concatenation of the token bytes. A second pass feeds arbitrary
unicode (surrogates, NULs, separators) through the real filesystem appender
inside a scratch directory. Any exception escaping ``notify`` is a crash.
"""
from __future__ import annotations
import atheris
import os
import sys
import tempfile

with atheris.instrument_imports():
    from notifier_core.append import FileAppender, notify
    from notifier_core.errors import FileOpenError
    from notifier_core.models import Status

_SCRATCH = tempfile.mkdtemp(prefix="notifier-fuzz-")


class _Sink:
    def __init__(self):
        self.files = {}

    def append(self, path: str, data: bytes) -> int:
        if not path:
            raise FileOpenError(path, FileNotFoundError(2, "No such file or directory"))
        self.files[path] = self.files.get(path, b"") + data
        return len(data)


def _decode(b: bytes) -> str:
    # what the interpreter hands us for raw argv bytes
    return os.fsdecode(b)


def _concatenation(fdp: atheris.FuzzedDataProvider) -> None:
    path = _decode(fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 16)))
    sink = _Sink()
    expected = b""
    for _ in range(fdp.ConsumeIntInRange(0, 8)):
        raw = fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 64))
        res = notify([path, _decode(raw)], appender=sink)
        if not path:
            if res.status is not Status.OPEN_ERROR:
                raise RuntimeError("empty path must fail at open")
            return
        if not res.ok or res.bytes_written != len(raw):
            raise RuntimeError(f"unexpected result {res!r}")
        expected += raw
    if path and sink.files.get(path, b"") != expected:
        raise RuntimeError("appended content is not the concatenation of tokens")

    short = notify([path][: fdp.ConsumeIntInRange(0, 1)], appender=sink)
    if short.status is not Status.USAGE_ERROR or short.exit_code != 1:
        raise RuntimeError("short argv must be a usage error")


def _real_files(fdp: atheris.FuzzedDataProvider) -> None:
    # separators stripped so writes stay inside the scratch directory
    name = fdp.ConsumeUnicode(fdp.ConsumeIntInRange(0, 24)).replace("/", "_")
    name = name.replace(os.sep, "_")
    token = fdp.ConsumeUnicode(fdp.ConsumeIntInRange(0, 64))
    res = notify([os.path.join(_SCRATCH, name), token], appender=FileAppender())
    if res.ok != (res.exit_code == 0):
        raise RuntimeError(f"status and exit code disagree: {res!r}")


def TestOneInput(data: bytes):  # noqa: N802 (Atheris signature)
    fdp = atheris.FuzzedDataProvider(data)
    if fdp.ConsumeBool():
        _concatenation(fdp)
    else:
        _real_files(fdp)


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
