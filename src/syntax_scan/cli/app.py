import logging

import typer
from pydantic import ValidationError
from rich.markup import escape

from syntax_scan.cli.scan import err_console, languages_command, scan_command
from syntax_scan.config import get_settings

app = typer.Typer(
    name="syntax-scan",
    help="Syntax Scan CLI: print syntax trees of the source files in a folder.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("scan")(scan_command)
app.command("languages")(languages_command)


@app.callback()
def _configure() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    app()
