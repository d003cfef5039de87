"""Rich rendering of scan and lookup results.

Example:
    from godirs.ui import DirsView

    view = DirsView()
    view.display_roots(roots)
    view.display_dirs(paths)
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from godirs.models import PackageDir, ScanRoot


class DirsView:
    """Rich-based output for directory listings and package lookups.

    Args:
        console: Optional Rich Console instance for output. Pass a Console
            writing to a StringIO to capture output in tests.

    Attributes:
        console: The Rich Console instance used for all output.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def display_roots(self, roots: List[ScanRoot]) -> None:
        """Show the roots being scanned in a header panel."""
        if not roots:
            body = "[yellow]No roots configured[/yellow]"
        else:
            body = "\n".join(
                f"{escape(str(root.path))}{' [dim](GOROOT)[/dim]' if root.primary else ''}"
                for root in roots
            )
        self.console.print(Panel(body, title="Scan Roots", border_style="blue"))

    def display_dirs(self, paths: List[str], truncated: bool = False) -> None:
        """Show source directories in discovery order."""
        table = Table(title="Source Directories", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Directory", style="cyan")
        for index, path in enumerate(paths, start=1):
            table.add_row(str(index), escape(path))
        self.console.print(table)

        noun = "directory" if len(paths) == 1 else "directories"
        suffix = " (limit reached)" if truncated else ""
        self.console.print(f"[green]{len(paths)} source {noun}{suffix}[/green]")

    def display_plain(self, paths: List[str]) -> None:
        """Write one directory per line with no markup or wrapping."""
        for path in paths:
            self.console.out(path, highlight=False)

    def display_matches(self, package: str, matches: List[PackageDir]) -> None:
        """Show the directories found for a package lookup."""
        if not matches:
            self.console.print(f"[yellow]No package found for:[/yellow] {escape(package)}")
            return

        table = Table(title=f"Matches for {escape(package)}")
        table.add_column("Import Path", style="green")
        table.add_column("Directory", style="cyan")
        table.add_column("Root", style="dim")
        for match in matches:
            table.add_row(
                escape(match.import_path or "."),
                escape(match.dir),
                escape(str(match.root.path)),
            )
        self.console.print(table)

    def display_errors(self, errors: List[OSError]) -> None:
        """Show directory read failures collected during the walk."""
        if not errors:
            return
        self.console.print("[yellow]Scanner warnings:[/yellow]")
        for error in errors:
            self.console.print(f"  [dim]- {escape(str(error))}[/dim]")
