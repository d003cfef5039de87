"""godirs - Go Source Directory Scanner.

A lazy, cached, breadth-first scanner of the Go source directories under
GOROOT and GOPATH, with a small CLI for listing them and looking up
packages by import path.
"""

__version__ = "0.1.0"

from .models import (
    PackageDir,
    ScanConfig,
    ScanRoot,
)
from .scanning import SourceDirs, get_dirs, start_dirs

__all__ = [
    "__version__",
    "PackageDir",
    "ScanConfig",
    "ScanRoot",
    "SourceDirs",
    "get_dirs",
    "start_dirs",
]


def main() -> None:
    """Entry point for the godirs CLI application.

    This function is called when the `godirs` command is invoked after
    package installation via pip. It imports and runs the Typer app
    from the godirs.cli module.
    """
    from godirs.cli import app
    app()
