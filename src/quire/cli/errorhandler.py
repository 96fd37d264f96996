"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from quire.config.exceptions import ConfigError
from quire.exceptions import QuireError
from quire.store.exceptions import (
    DocumentNotFoundError,
    DocumentValidationError,
    InvalidDocumentIdError,
    StorageUnavailableError,
)

console = Console(stderr=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise with the full traceback. If False, print a
            one-line explanation and exit with status 1.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except StorageUnavailableError as e:
        if debug:
            raise
        console.print(f"[bold red]Content root unavailable:[/bold red] {escape(str(e))}")
        console.print("Check [bold]store.content_root[/bold] in .quire.toml or QUIRE_STORE__CONTENT_ROOT.")
        raise typer.Exit(1) from e
    except DocumentNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]Document not found:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except (DocumentValidationError, InvalidDocumentIdError) as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid document:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except QuireError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
