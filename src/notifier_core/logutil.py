import logging
import re
import sys
from typing import Iterable, Union


_LONG_TOKEN = re.compile(r"\b([0-9a-fA-F]{12})[0-9a-fA-F]{20,}\b")


class TokenRedactingFilter(logging.Filter):
    """Shorten long hash-like tokens in log records to a 12 char prefix."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        short = _LONG_TOKEN.sub(r"\1...", msg)
        if short != msg:
            record.msg = short
            record.args = None
        return True


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    loggers: Iterable[str] = ("notifier_core", "notifier_cli"),
) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    f = TokenRedactingFilter()
    for name in loggers:
        lg = logging.getLogger(name)
        lg.setLevel(level)
        ours = [h for h in lg.handlers if getattr(h, "_notifier", False)]
        if ours:
            # sys.stderr may have been swapped since the last call
            for h in ours:
                h.stream = sys.stderr  # type: ignore[attr-defined]
            continue
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("%(name)s %(levelname)s %(message)s"))
        h.addFilter(f)
        h._notifier = True  # type: ignore[attr-defined]
        lg.addHandler(h)
        lg.propagate = False
