"""CLI commands using Typer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from fsguard.context import AppContext

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fsguard import __version__
from fsguard.context import create_context
from fsguard.filesystem import FileSystemError

app = typer.Typer(
    name="fsguard",
    help="Filesystem checks and directory operations",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"fsguard v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log filesystem failures")
    ] = False,
) -> None:
    """Filesystem checks and directory operations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _show_success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}", soft_wrap=True)


def _show_error(message: str) -> None:
    console.print(f"[red]✗[/red] {message}", soft_wrap=True)


def _parse_mode(mode: str) -> int:
    """Parse octal permission text such as '755' or '0o755'."""
    try:
        return int(mode, 8)
    except ValueError as e:
        raise typer.BadParameter(f"'{mode}' is not an octal mode") from e


@app.command("check")
def check(
    path: Annotated[str, typer.Argument(help="Path to inspect")],
    _context=None,
) -> None:
    """Show existence, type and access checks for a path."""
    ctx = _context or create_context()
    fs = ctx.filesystem

    results = [
        ("exists", fs.exists(path)),
        ("file", fs.is_file(path)),
        ("directory", fs.is_directory(path)),
        ("readable", fs.is_readable(path)),
        ("writable", fs.is_writable(path)),
    ]

    table = Table(title=escape(path))
    table.add_column("Check", style="cyan")
    table.add_column("Result")
    for name, result in results:
        table.add_row(name, "[green]yes[/green]" if result else "[red]no[/red]")
    console.print(table)


@app.command("mkdir")
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    mode: Annotated[
        str, typer.Option("--mode", "-m", help="Permission bits in octal")
    ] = "777",
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parents")
    ] = False,
    _context=None,
) -> None:
    """Create a directory."""
    ctx = _context or create_context()
    permissions = _parse_mode(mode)

    try:
        created = ctx.filesystem.make_directory(path, permissions, recursive=parents)
    except FileSystemError as e:
        _show_error(escape(str(e)))
        raise typer.Exit(1) from e
    _show_success(f"Created {escape(created)}")


@app.command("rmdir")
def rmdir(
    path: Annotated[str, typer.Argument(help="Empty directory to remove")],
    _context=None,
) -> None:
    """Remove an empty directory."""
    ctx = _context or create_context()

    try:
        ctx.filesystem.remove_directory(path)
    except FileSystemError as e:
        _show_error(escape(str(e)))
        raise typer.Exit(1) from e
    _show_success(f"Removed {escape(path)}")


@app.command("dir")
def directory(
    path: Annotated[str, typer.Argument(help="Directory path")],
    create: Annotated[
        bool, typer.Option("--create", "-c", help="Create it when missing")
    ] = False,
    _context=None,
) -> None:
    """Print a directory's canonical path, optionally creating it."""
    ctx = _context or create_context()

    try:
        resolved = ctx.filesystem.directory(path, create=create)
    except FileSystemError as e:
        _show_error(escape(str(e)))
        raise typer.Exit(1) from e
    if resolved is None:
        _show_error(f"'{escape(path)}' is not a directory")
        raise typer.Exit(1)
    console.print(resolved, markup=False, soft_wrap=True)


@app.command("realpath")
def realpath(
    path: Annotated[str, typer.Argument(help="Path to resolve")],
    _context=None,
) -> None:
    """Print the canonical absolute form of a path."""
    ctx = _context or create_context()
    console.print(ctx.filesystem.real_path(path), markup=False, soft_wrap=True)


if __name__ == "__main__":
    app()
