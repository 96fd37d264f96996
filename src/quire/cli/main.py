"""Main Typer application for quire."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from quire.cli.errorhandler import handle_cli_errors
from quire.config import QuireConfig
from quire.logging_setup import configure_logging
from quire.store import DocumentStore

logger = logging.getLogger(__name__)
console = Console()

app = typer.Typer(
    name="quire",
    help="Inspect and validate the Markdown documents of a static site.",
    no_args_is_help=True,
)

SiteRootArg = Annotated[
    Path,
    typer.Argument(help="Site root directory containing .quire.toml (default: current directory)"),
]


class _State:
    debug: bool = False


state = _State()


@app.callback()
def _main(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Show full tracebacks instead of short error messages"),
    ] = False,
) -> None:
    configure_logging(logging.DEBUG if debug else None)
    state.debug = debug


def _open_store(site_root: Path) -> DocumentStore:
    config = QuireConfig.load(site_root)
    settings = config.store_settings()
    logger.debug("Using content root %s", settings.content_root)
    return DocumentStore.from_settings(settings)


@app.command("ids")
def list_ids(site_root: SiteRootArg = Path()) -> None:
    """Print every document id, one per line."""
    with handle_cli_errors(debug=state.debug):
        store = _open_store(site_root)
        for document_id in store.list_document_ids():
            typer.echo(document_id)


@app.command("list")
def list_documents(site_root: SiteRootArg = Path()) -> None:
    """Show every document, newest first."""
    with handle_cli_errors(debug=state.debug):
        store = _open_store(site_root)
        documents = store.list_documents()

    if not documents:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(title=f"Documents ({len(documents)})")
    table.add_column("Date", style="blue", no_wrap=True)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    for doc in documents:
        table.add_row(doc.date, doc.id, escape(doc.title))
    console.print(table)


@app.command("show")
def show_document(
    document_id: Annotated[str, typer.Argument(help="Id of the document to show")],
    site_root: SiteRootArg = Path(),
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Print the Markdown source instead of rendering it"),
    ] = False,
) -> None:
    """Show one document's metadata and body."""
    with handle_cli_errors(debug=state.debug):
        store = _open_store(site_root)
        doc = store.load_document(document_id)

    if raw:
        typer.echo(doc.body)
        return

    lines = [f"[bold]Date:[/bold] {doc.date}", f"[bold]Id:[/bold] {doc.id}"]
    lines.extend(f"[bold]{escape(key)}:[/bold] {escape(str(value))}" for key, value in doc.metadata.extra.items())
    console.print(Panel("\n".join(lines), title=escape(doc.title), border_style="blue"))
    console.print(Markdown(doc.body))


@app.command("check")
def check_documents(site_root: SiteRootArg = Path()) -> None:
    """Load every document and report the ones that fail."""
    with handle_cli_errors(debug=state.debug):
        store = _open_store(site_root)
        total = len(store.list_document_ids())
        failures = store.validate_documents()

    if not failures:
        console.print(f"[bold green]All {total} document(s) are valid.[/bold green]")
        return

    table = Table(title=f"{len(failures)} of {total} document(s) failed")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Error", style="red", no_wrap=True)
    table.add_column("Reason")
    for failure in failures:
        table.add_row(failure.document_id, type(failure.error).__name__, escape(failure.reason))
    console.print(table)
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
