import logging
import sys
from pathlib import Path
from typing import Dict

import pytest

# Ensure the 'src' directory is on sys.path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from notifier_core.errors import FileOpenError, FileWriteError  # noqa: E402


class MemoryAppender:
    """In-memory stand-in for the filesystem appender.

    Paths listed in ``unopenable`` / ``unwritable`` fail the way a real file
    would at open or write time.
    """

    def __init__(self):
        self.files: Dict[str, bytes] = {}
        self.unopenable = set()
        self.unwritable = set()

    def append(self, path: str, data: bytes) -> int:
        if path in self.unopenable:
            raise FileOpenError(path, PermissionError(13, "Permission denied"))
        self.files.setdefault(path, b"")
        if path in self.unwritable:
            raise FileWriteError(path, OSError(28, "No space left on device"))
        self.files[path] += data
        return len(data)


@pytest.fixture
def memory_appender():
    return MemoryAppender()


@pytest.fixture(autouse=True)
def _drop_notifier_handlers():
    yield
    # handlers keep a reference to whatever stderr was current (CliRunner swaps it)
    for name in ("notifier_core", "notifier_cli"):
        lg = logging.getLogger(name)
        for h in [h for h in lg.handlers if getattr(h, "_notifier", False)]:
            lg.removeHandler(h)
