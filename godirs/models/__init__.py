"""
Models package for godirs.

This package provides convenient imports for all data models:
- ScanConfig: Traversal settings (source suffix, root subdirectory, ordering)
- ScanRoot: A configured top-level hierarchy
- PackageDir: A source directory resolved to its import path
"""

from .data_models import (
    PackageDir,
    ScanConfig,
    ScanRoot,
)

__all__ = [
    "PackageDir",
    "ScanConfig",
    "ScanRoot",
]
