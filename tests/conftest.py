"""Pytest fixtures for godirs tests."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Generator, Iterable, List

import pytest

from godirs.models import ScanConfig, ScanRoot
from godirs.scanning import SourceDirs, source_dirs


def create_tree(base: Path, files: Iterable[str]) -> Path:
    """Create files (and their parent directories) under base.

    Entries ending in "/" create an empty directory instead of a file.

    Args:
        base: Directory to create the tree in.
        files: Relative paths, e.g. ["src/a/x.go", "src/empty/"].

    Returns:
        The base path.
    """
    for relative in files:
        target = base / relative
        if relative.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("package p\n")
    return base


def drain(dirs: SourceDirs) -> List[str]:
    """Call next() until the scan is done and return what it produced."""
    paths = []
    while True:
        path, ok = dirs.next()
        if not ok:
            return paths
        paths.append(path)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sorted_config() -> ScanConfig:
    """ScanConfig with deterministic ordering within each directory."""
    return ScanConfig(sort_entries=True)


@pytest.fixture
def flat_root(temp_dir: Path) -> ScanRoot:
    """Single root with two source directories and a hidden one.

    Creates:
        r1/src/
        ├── a/x.go
        ├── b/x.go
        └── .hidden/y.go
    """
    create_tree(temp_dir / "r1", ["src/a/x.go", "src/b/x.go", "src/.hidden/y.go"])
    return ScanRoot(path=temp_dir / "r1", primary=True)


@pytest.fixture
def layered_root(temp_dir: Path) -> ScanRoot:
    """Single root where one source directory sits below another.

    Creates:
        r1/src/
        ├── a/x.go
        ├── a/deep/y.go
        └── b/z.go
    """
    create_tree(temp_dir / "r1", ["src/a/x.go", "src/a/deep/y.go", "src/b/z.go"])
    return ScanRoot(path=temp_dir / "r1", primary=True)


@pytest.fixture
def go_workspace(temp_dir: Path) -> Path:
    """A GOROOT and a GOPATH with overlapping package names.

    Creates:
        goroot/src/
        ├── fmt/print.go
        ├── encoding/doc.txt
        ├── encoding/json/decode.go
        └── net/http/server.go
        gopath/src/
        └── github.com/user/json/json.go
    """
    create_tree(
        temp_dir / "goroot",
        [
            "src/fmt/print.go",
            "src/encoding/doc.txt",
            "src/encoding/json/decode.go",
            "src/net/http/server.go",
        ],
    )
    create_tree(temp_dir / "gopath", ["src/github.com/user/json/json.go"])
    return temp_dir


@pytest.fixture(autouse=True)
def reset_process_scanner(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test a fresh process-wide scanner slot."""
    monkeypatch.setattr(source_dirs, "_dirs", None)


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[None, None, None]:
    """Undo logging changes the CLI makes to the godirs logger."""
    package_logger = logging.getLogger("godirs")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
