# zfinder/cli/main.py

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from zfinder.core.icon_classifier import (
    CATEGORY_EXTENSIONS, CATEGORY_SYMBOLS, ExtensionCategory, classify, symbol_for
)
from zfinder.core.opener import SystemOpener
from zfinder.core.pins import PinBoard
from zfinder.core.dispatch import QueueDispatcher
from zfinder.core.selection import SelectionController
from zfinder.core.settings import load_settings

console = Console()
logger = logging.getLogger(__name__)

CONFIG_OPTION = click.option(
    '--config', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path), default=None,
    help="Path to a custom settings.json."
)


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.version_option(version="1.0", prog_name="ZFinder")
def zf():
    """
    ZFinder - pin paths and open them in the system file browser.

    Use `[COMMAND] --help` for more information on a specific command.
    """
    pass


@zf.command(name='classify')
@click.argument('extensions', nargs=-1, required=True)
def classify_extensions(extensions):
    """Shows the icon category for each EXTENSION (e.g. jpg, .PDF)."""
    table = Table(title="Extension Categories", style="cyan", title_style="bold magenta")
    table.add_column("Extension", style="green", no_wrap=True)
    table.add_column("Category", style="blue")
    table.add_column("Icon", style="yellow")

    for ext in extensions:
        category = classify(ext)
        table.add_row(ext, category.value, symbol_for(ext))

    console.print(table)


@zf.command()
def categories():
    """Lists every category and the extensions that belong to it."""
    table = Table(title="Classification Table", style="cyan", title_style="bold magenta")
    table.add_column("Category", style="blue")
    table.add_column("Extensions", style="green")
    table.add_column("Icon", style="yellow")

    for category in ExtensionCategory:
        extensions = CATEGORY_EXTENSIONS.get(category)
        listed = ", ".join(sorted(extensions)) if extensions else "[dim]anything else[/dim]"
        table.add_row(category.value, listed, CATEGORY_SYMBOLS[category])

    console.print(table)


@zf.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(path_type=Path))
def pins(paths):
    """Shows how each PATH would appear as a pin."""
    board = PinBoard()
    for path in paths:
        board.add_path(path)

    table = Table(title="Pins", style="cyan", title_style="bold magenta")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Category", style="blue")
    table.add_column("Exists")
    table.add_column("Path", style="yellow")

    for pin in board:
        exists = "[green]yes[/green]" if pin.exists() else "[red]no[/red]"
        table.add_row(pin.name, pin.category.value, exists, pin.path)

    console.print(table)


@zf.command(name='open')
@click.argument('path', type=click.Path(path_type=Path))
@CONFIG_OPTION
def open_path(path: Path, config: Path):
    """Opens PATH in the system file browser."""
    try:
        settings = load_settings(config)
        controller = SelectionController(QueueDispatcher(), SystemOpener.from_settings(settings))
        target = path.expanduser().absolute()

        if not target.exists():
            console.print(f"[yellow]Warning: '{target}' does not exist. Trying anyway.[/yellow]")

        controller.request_open(str(target))
        console.print(f"Opening [bright_magenta]{target}[/bright_magenta]")
    except Exception as e:
        console.print(f"[bold red]An unexpected error occurred: {e}[/bold red]")
        logger.error("CLI open command failed.", exc_info=True)

