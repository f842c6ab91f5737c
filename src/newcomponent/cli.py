"""
newcomponent.cli - Command Line Interface
=========================================

This module provides the ``new-component`` command using Typer, and the
Rich presentation layer that turns pipeline events into terminal output.

Usage Examples
--------------
Create a component with the configured defaults:
    $ new-component Button

TypeScript, kebab-case file names, custom directory:
    $ new-component NavBar --lang ts --case kebab --dir app/ui

Show what the pipeline is doing:
    $ new-component Button --verbose

Defaults come from ``~/.new-component-config.json`` and
``./.new-component-config.json`` (see ``newcomponent.config``); command
line options take precedence over both.

Exit Codes
----------
0 when the component was created, 1 for any failure (invalid name,
existing component, unreadable config, write errors).

See Also
--------
- generator.py: The scaffold pipeline
- config.py: Configuration file resolution
"""

from __future__ import annotations

import asyncio
import logging
import random
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from newcomponent import __version__
from newcomponent.generator import ScaffoldEvent, run_pipeline
from newcomponent.models import FileNameCase, Language, ScaffoldPlan, Step


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="new-component",
    help="Scaffold a new React component.",
    rich_markup_mode="rich",
    add_completion=False,
)

# Console for rich output
console = Console()

AFFIRMATIONS = [
    "You're doing great!",
    "Keep up the fantastic work!",
    "Another one for the library.",
    "Nice name, by the way.",
    "Future you says thanks.",
    "Small pieces, big things.",
    "Ship it!",
]


# =============================================================================
# Presentation
# =============================================================================

def _choices(options: list[tuple[str, str]], selected: str) -> str:
    """Render every option, highlighting the selected one."""
    return "  ".join(
        f"[bold blue]{label}[/]" if value == selected else f"[dim]{label}[/]"
        for value, label in options
    )


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def log_intro(plan: ScaffoldPlan) -> None:
    """Summarize what is about to be created."""
    lang = _choices([(lng.value, lng.display_name) for lng in Language], plan.lang.value)
    case = _choices(
        [(c.value, c.display_name) for c in FileNameCase],
        plan.file_name_case.value,
    )

    console.print()
    console.print(
        Panel(
            f"[bold]Directory:[/]  [bold blue]{_display_path(plan.component_dir)}[/]\n"
            f"[bold]Language:[/]   {lang}\n"
            f"[bold]File Names:[/] {case}",
            title=f"✨ Creating the [bold yellow]{plan.component_name}[/] component ✨",
            border_style="blue",
        )
    )
    console.print()


def log_item_completion(text: str) -> None:
    console.print(f"[green]✓[/] {text}")


def log_conclusion() -> None:
    console.print()
    console.print("[bold green]Component created![/]")
    console.print(f"[dim]{random.choice(AFFIRMATIONS)}[/]")
    console.print()


def log_error(event: ScaffoldEvent) -> None:
    console.print()
    console.print(
        Panel(
            f"[red]{escape(str(event.error))}[/]",
            title="[bold red]Error creating component[/]",
            border_style="red",
        )
    )
    console.print()


COMPLETION_MESSAGES = {
    Step.CREATING_DIRECTORY: "Directory created.",
    Step.WRITING_COMPONENT_FILE: "Component built and saved to disk.",
    Step.WRITING_INDEX_FILE: "Index file built and saved to disk.",
}


def report_event(event: ScaffoldEvent) -> None:
    """Print pipeline progress; passed to the pipeline as ``on_event``."""
    if event.failed:
        log_error(event)
    elif event.step == Step.PLANNING and event.plan is not None:
        log_intro(event.plan)
    elif event.step in COMPLETION_MESSAGES:
        log_item_completion(COMPLETION_MESSAGES[event.step])
    elif event.step == Step.DONE:
        log_conclusion()


def configure_logging(verbose: bool) -> None:
    """Route pipeline debug logging to the terminal when verbose."""
    if not verbose:
        return

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold green]new-component[/] version [cyan]{__version__}[/]")
        raise typer.Exit()


# =============================================================================
# Main Command
# =============================================================================

@app.command()
def main(
    name: Annotated[
        str | None,
        typer.Argument(
            help="Name of the component to create, in PascalCase (e.g. MyComponent)",
            show_default=False,
        ),
    ] = None,
    lang: Annotated[
        str | None,
        typer.Option(
            "--lang",
            "-l",
            help='Which language to use: "js" or "ts" (default: "js")',
        ),
    ] = None,
    directory: Annotated[
        str | None,
        typer.Option(
            "--dir",
            "-d",
            help='Path to the "components" directory (default: "src/components")',
        ),
    ] = None,
    case: Annotated[
        str | None,
        typer.Option(
            "--case",
            "-c",
            help='File and directory name case: "pascal" or "kebab" (default: "pascal")',
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug output from each pipeline step",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Create a new React component.

    Writes [cyan]<dir>/<Name>/<Name>.jsx[/] and an [cyan]index.js[/] barrel file
    that re-exports it.

    [bold]Examples:[/]

        new-component Button

        new-component NavBar --lang ts --case kebab
    """
    configure_logging(verbose)

    resolved_lang: Language | None = None
    if lang:
        try:
            resolved_lang = Language(lang.lower())
        except ValueError:
            valid = ", ".join(lng.value for lng in Language)
            rprint(f"[red]Error:[/] Invalid language '{lang}'. Valid: {valid}")
            raise typer.Exit(1)

    resolved_case: FileNameCase | None = None
    if case:
        try:
            resolved_case = FileNameCase(case.lower())
        except ValueError:
            valid = ", ".join(c.value for c in FileNameCase)
            rprint(f"[red]Error:[/] Invalid case format '{case}'. Valid: {valid}")
            raise typer.Exit(1)

    result = asyncio.run(
        run_pipeline(
            name,
            overrides={
                "lang": resolved_lang,
                "dir": directory,
                "file_name_case": resolved_case,
            },
            on_event=report_event,
        )
    )

    if not result.success:
        raise typer.Exit(1)
