"""
godirs - Go Source Directory Scanner CLI.

A command-line interface for enumerating the Go source directories found
under GOROOT and every GOPATH entry, and for resolving import paths to
directories.

Usage Examples:
    # List every source directory, breadth-first
    godirs list

    # Only the first 20, one per line
    godirs list --limit 20 --plain

    # Find the directory of a package
    godirs find encoding/json

    # Every directory whose import path ends in "json"
    godirs find json --all

    # Explicit roots, sorted within each directory, with debug logging
    godirs --goroot /usr/local/go --gopath ~/go --sorted --verbose list
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from godirs.lookup import PackageFinder
from godirs.models import PackageDir, ScanConfig
from godirs.roots import build_roots, resolve_gopath, resolve_goroot
from godirs.scanning import get_dirs, start_dirs
from godirs.ui import DirsView

__version__ = "0.1.0"

# Initialize Typer app
app = typer.Typer(
    name="godirs",
    help="Go Source Directory Scanner - List and look up Go source directories.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"godirs v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    package_logger = logging.getLogger("godirs")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
    )
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    goroot: Optional[str] = typer.Option(
        None,
        "--goroot",
        envvar="GOROOT",
        help="Primary root (Go installation tree).",
    ),
    gopath: Optional[str] = typer.Option(
        None,
        "--gopath",
        envvar="GOPATH",
        help="Additional roots, separated by the platform path-list separator.",
    ),
    sort_entries: bool = typer.Option(
        False,
        "--sorted",
        "-s",
        help="Sort entries by name within each directory.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
) -> None:
    """Go Source Directory Scanner - List and look up Go source directories."""
    configure_logging(verbose)

    resolved_goroot = resolve_goroot(goroot)
    roots = build_roots(resolved_goroot, resolve_gopath(gopath, resolved_goroot))
    if not roots:
        console.print(
            "[red]Error:[/red] No roots to scan. Set GOROOT or GOPATH, "
            "or pass --goroot/--gopath."
        )
        raise typer.Exit(1)

    # The walk starts now, before any command asks for a directory.
    start_dirs(roots, ScanConfig(sort_entries=sort_entries))
    ctx.obj = {"verbose": verbose}


def _is_verbose(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


@app.command("list")
def list_dirs(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Stop after this many directories.",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        "-p",
        help="Print one directory per line without formatting.",
    ),
) -> None:
    """
    List every source directory in breadth-first order.

    Roots are listed in order: GOROOT first, then each GOPATH entry.
    """
    dirs = get_dirs()
    view = DirsView(console)

    paths: List[str] = []
    truncated = False
    try:
        for path in dirs:
            if limit is not None and len(paths) >= limit:
                truncated = True
                break
            paths.append(path)
    except KeyboardInterrupt:
        console.print("\n[yellow]Listing interrupted by user.[/yellow]")
        raise typer.Exit(130)

    if plain:
        view.display_plain(paths)
    else:
        view.display_roots(dirs.roots)
        view.display_dirs(paths, truncated=truncated)

    if _is_verbose(ctx):
        view.display_errors(dirs.get_errors())


@app.command()
def find(
    ctx: typer.Context,
    package: str = typer.Argument(
        ...,
        help="Full or partial import path, e.g. 'fmt' or 'net/http'.",
    ),
    all_matches: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Show every matching directory instead of the best one.",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        "-p",
        help="Print matching directories one per line without formatting.",
    ),
) -> None:
    """
    Find the directory holding a package.

    An exact import path match wins; otherwise the first directory whose
    import path ends with the given path is used. Exits with status 1
    when nothing matches.
    """
    dirs = get_dirs()
    view = DirsView(console)
    finder = PackageFinder(dirs)

    try:
        if all_matches:
            matches = finder.find_all(package)
        else:
            best: Optional[PackageDir] = finder.find(package)
            matches = [best] if best is not None else []
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Lookup interrupted by user.[/yellow]")
        raise typer.Exit(130)

    if plain and matches:
        view.display_plain([match.dir for match in matches])
    else:
        view.display_matches(package, matches)

    if _is_verbose(ctx):
        view.display_errors(dirs.get_errors())

    if not matches:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
