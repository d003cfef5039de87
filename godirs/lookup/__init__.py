"""Package lookup for godirs.

Provides PackageFinder, which resolves a full or partial import path to
the source directories found by the scanner.
"""

from .package_finder import PackageFinder

__all__ = ["PackageFinder"]
