"""
Core data models for godirs.

This module contains the following dataclasses:
- ScanConfig: Settings shared by every traversal of the scanner
- ScanRoot: A configured root hierarchy (GOROOT or a GOPATH entry)
- PackageDir: A source directory together with its import path
"""

from dataclasses import dataclass
from pathlib import Path

# Suffix identifying a source file.
DEFAULT_SOURCE_SUFFIX = ".go"

# Subdirectory of every root that holds the source tree.
DEFAULT_ROOT_SUBDIR = "src"


@dataclass(frozen=True)
class ScanConfig:
    """Settings for the breadth-first source directory walk."""
    source_suffix: str = DEFAULT_SOURCE_SUFFIX  # File name suffix marking a source file
    root_subdir: str = DEFAULT_ROOT_SUBDIR      # Appended to each root before walking
    sort_entries: bool = False                  # Sort entries by name within each directory


@dataclass(frozen=True)
class ScanRoot:
    """A configured top-level hierarchy under which source directories are sought."""
    path: Path                        # Absolute root path
    primary: bool = False             # True for the installation tree (GOROOT)

    def src_dir(self, config: ScanConfig) -> Path:
        """Return the directory the walk starts from for this root."""
        return self.path / config.root_subdir


@dataclass(frozen=True)
class PackageDir:
    """A candidate directory resolved to the import path it provides."""
    dir: str                          # Absolute directory path as emitted by the scanner
    import_path: str                  # Slash-separated path relative to the root's src dir
    root: ScanRoot                    # Root the directory was found under
