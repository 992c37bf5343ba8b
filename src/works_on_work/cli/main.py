"""Main Typer application for works-on-work."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from works_on_work.cli.errorhandler import console, handle_cli_errors
from works_on_work.config import PathsSettings, SitePaths, SiteSettings, load_site_config
from works_on_work.content import load_content
from works_on_work.content.models import EXPECTED_SLOT_COUNT
from works_on_work.init import scaffold_site
from works_on_work.orchestration import build_site

app = typer.Typer(
    name="works-on-work",
    help="Build a bilingual single-page blog from JSON content and an HTML template",
    add_completion=False,
)

logger = logging.getLogger(__name__)

SiteRootArgument = Annotated[
    Path,
    typer.Argument(help="Site root containing content/, templates/ and works_on_work.toml"),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Show full tracebacks on error")]


def _configure_logging(*, debug: bool) -> None:
    """Send package log records to the console through Rich."""
    package_logger = logging.getLogger("works_on_work")
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        return
    package_logger.addHandler(
        RichHandler(
            console=console,
            show_path=False,
            show_level=False,
            show_time=False,
            rich_tracebacks=True,
        )
    )


def _apply_cli_overrides(config: SiteSettings, *, output: str | None) -> SiteSettings:
    if output is None:
        return config
    try:
        config.paths = PathsSettings.model_validate({**config.paths.model_dump(), "output_dir": output})
    except ValidationError as e:
        raise typer.BadParameter(str(e.errors()[0]["msg"]), param_hint="--output") from e
    return config


@app.callback()
def main() -> None:
    """works-on-work static site builder."""


@app.command()
def build(
    site_root: SiteRootArgument = Path(),
    *,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Output directory relative to the site root (default: dist)"),
    ] = None,
    debug: DebugOption = False,
) -> None:
    """Wipe the output directory and build every configured page."""
    _configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        config = _apply_cli_overrides(load_site_config(site_root.resolve()), output=output)
        result = build_site(site_root, config=config)

    logger.debug("Wrote %d page(s) to %s", len(result.pages), result.output_dir)


@app.command()
def check(
    site_root: SiteRootArgument = Path(),
    *,
    debug: DebugOption = False,
) -> None:
    """Load content without writing anything and report authoring warnings."""
    _configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        paths = SitePaths(site_root)
        bundle = load_content(paths)

    table = Table(title=f"Posts ({len(bundle.posts)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Date", style="green")
    table.add_column("Slots", justify="center")
    table.add_column("Archived", justify="center", style="dim")
    for post in bundle.posts:
        slots = post.get("slots")
        slot_count = len(slots) if isinstance(slots, list) else 0
        slot_style = "" if slot_count == EXPECTED_SLOT_COUNT else "[yellow]"
        table.add_row(
            str(post.get("id", "-")),
            str(post.get("date") or "-"),
            f"{slot_style}{slot_count}",
            "yes" if post.get("archived") else "",
        )
    console.print(table)

    if bundle.warnings:
        console.print(f"[yellow]{len(bundle.warnings)} warning(s)[/yellow]")
    else:
        console.print("[green]No warnings[/green]")


@app.command()
def init(
    site_root: Annotated[Path, typer.Argument(help="Directory for the new site (e.g. 'my-blog')")],
    *,
    site_name: Annotated[
        str | None,
        typer.Option("--site-name", help="Site name (defaults to the directory name)"),
    ] = None,
    force: Annotated[bool, typer.Option("--force", help="Overwrite existing starter files")] = False,
    debug: DebugOption = False,
) -> None:
    """Create a starter site that builds out of the box."""
    _configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        result = scaffold_site(site_root, site_name, force=force)

    if result.created:
        console.print(
            Panel(
                f"[bold green]✅ Starter site created[/bold green]\n\n"
                f"📁 Site root: {result.site_root}\n"
                f"📝 Files written: {len(result.created)}\n\n"
                f"[bold]Next steps:[/bold]\n"
                f"• Add posts to [cyan]content/posts/[/cyan]\n"
                f"• Build: [cyan]works-on-work build {site_root}[/cyan]",
                title="🛠️ Initialization Complete",
                border_style="green",
            )
        )
    else:
        console.print(
            Panel(
                f"[bold yellow]⚠️ Site already exists at {result.site_root}[/bold yellow]\n\n"
                "Nothing was overwritten. Use [cyan]--force[/cyan] to reset the starter files.",
                title="📁 Site Exists",
                border_style="yellow",
            )
        )
