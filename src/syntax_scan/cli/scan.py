from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from syntax_scan.config import get_settings
from syntax_scan.core.errors import GrammarLoadError, RootNotFoundError
from syntax_scan.core.graph import QueryGraphBuilder
from syntax_scan.core.languages import GrammarRegistry
from syntax_scan.core.render import OutlineRenderer
from syntax_scan.core.scan import OutputMode, scan

console = Console()
err_console = Console(stderr=True)


def _load_registry() -> GrammarRegistry:
    try:
        return GrammarRegistry.load()
    except GrammarLoadError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc


def _load_graph_builder(registry: GrammarRegistry) -> QueryGraphBuilder:
    try:
        return QueryGraphBuilder(registry.grammars())
    except GrammarLoadError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc


def scan_command(
    source_folder: Annotated[
        Path | None, typer.Option("--source-folder", "-s", help="Folder to scan. Defaults to the current directory.")
    ] = None,
    mode: Annotated[
        OutputMode | None, typer.Option(help="Print syntax trees or name-binding graphs. Defaults to SYNTAX_SCAN_MODE.")
    ] = None,
) -> None:
    """Parse every supported source file under a folder and print its syntax tree."""
    root = source_folder if source_folder is not None else Path(".")
    if not root.exists():
        err_console.print(f"[red]{escape(str(RootNotFoundError(root)))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    resolved_mode = mode if mode is not None else get_settings().mode
    registry = _load_registry()
    graph_builder = _load_graph_builder(registry) if resolved_mode is OutputMode.GRAPH else None

    err_console.print(f"Scanning for source code in path: {escape(str(root.resolve()))}", highlight=False, soft_wrap=True)
    try:
        summary = scan(root, registry, OutlineRenderer(console), resolved_mode, graph_builder)
    except OSError as exc:
        err_console.print(f"[red]Failed processing source files: {escape(str(exc))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc

    err_console.print(f"Analysis completed in [bold]{summary.elapsed_ms}[/bold] ms", highlight=False, soft_wrap=True)
    if summary.files_failed:
        err_console.print(f"[yellow]{summary.files_failed} file(s) could not be analyzed[/yellow]", soft_wrap=True)


def languages_command() -> None:
    """List the file extensions that have a grammar."""
    registry = _load_registry()
    table = Table(show_lines=False)
    table.add_column("extension")
    table.add_column("language")
    for extension, language in sorted(registry.extensions().items()):
        table.add_row(f".{extension}", language.value)
    console.print(table)
