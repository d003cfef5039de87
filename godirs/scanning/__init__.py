"""Source directory scanning package for godirs.

This package provides the lazy, cached scanner and its building blocks:

- DirWalker: Breadth-first traversal yielding directories that hold
  source files.
- Handoff: Single-slot rendezvous channel between the walker thread and
  the consumer.
- SourceDirs: Caches what the walker delivers so the sequence can be
  replayed with reset() without walking the filesystem again.

Example:
    >>> from godirs.scanning import SourceDirs
    >>> dirs = SourceDirs(roots)
    >>> path, ok = dirs.next()
"""

from .dir_walker import DirWalker, log_error
from .handoff import Handoff
from .source_dirs import SourceDirs, get_dirs, start_dirs

__all__ = [
    "DirWalker",
    "Handoff",
    "SourceDirs",
    "get_dirs",
    "log_error",
    "start_dirs",
]
