from __future__ import annotations
from typing import List
import typer
from typer.core import TyperCommand
from rich.console import Console

from notifier_core.append import notify
from notifier_core.logutil import setup_logging
from notifier_core.settings import settings

RAW_ARGS = "notifier.raw_args"


class RawArgsCommand(TyperCommand):
    """Command that hands argv through untouched.

    Every value is a literal, including ``--`` and dash-prefixed tokens, so
    click's option parser never sees them.
    """

    def parse_args(self, ctx, args: List[str]) -> List[str]:  # type: ignore[override]
        ctx.meta[RAW_ARGS] = list(args)
        return super().parse_args(ctx, [])


app = typer.Typer(add_completion=False, context_settings={"help_option_names": []})


@app.command(cls=RawArgsCommand)
def main(ctx: typer.Context):
    """Append HASH verbatim to FILENAME, creating the file if needed."""
    setup_logging(settings.log_level)
    args = ctx.meta.get(RAW_ARGS, [])
    result = notify(args, prog=ctx.find_root().info_name or "notifier")
    if not result.ok:
        err = Console(
            stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
        err.print(result.message)
        raise typer.Exit(code=result.exit_code)


if __name__ == "__main__":
    app()
