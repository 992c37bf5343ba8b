"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from works_on_work.config.exceptions import ConfigError
from works_on_work.init.exceptions import ScaffoldingError
from works_on_work.orchestration.exceptions import TemplateNotFoundError
from works_on_work.output.exceptions import OutputError
from works_on_work.utils.paths import PathTraversalError

console = Console()


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise with the full traceback. If False, print a
            one-line error and exit with status 1.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit, typer.BadParameter):
        raise
    except TemplateNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]✗ Template Missing:[/bold red] {e}")
        console.print(
            "Create the template or point [bold]pages[/bold] in works_on_work.toml at an existing one."
        )
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]⚙️ Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except (OutputError, PathTraversalError) as e:
        if debug:
            raise
        console.print(f"[bold red]📁 Output Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ScaffoldingError as e:
        if debug:
            raise
        console.print(f"[bold red]🏗️ Scaffolding Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]💥 An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
