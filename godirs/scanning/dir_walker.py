"""Breadth-first traversal of source roots.

This module provides the DirWalker class, which walks each configured
root level by level and yields every directory holding at least one
source file.

Example:
    >>> from godirs.scanning import DirWalker
    >>> walker = DirWalker()
    >>> for directory in walker.walk(roots):
    ...     print(directory)
"""

import logging
import os
from typing import Callable, Iterable, Iterator, List, Optional

from godirs.models import ScanConfig, ScanRoot

logger = logging.getLogger("godirs.scanning")

ErrorSink = Callable[[OSError], None]


def log_error(error: OSError) -> None:
    """Default error sink: report the failure on the scanning logger."""
    logger.warning("%s", error)


class DirWalker:
    """Walks root hierarchies breadth-first, yielding source directories.

    Each root is walked from its source subdirectory (``<root>/src``).
    Directories whose names begin with a dot are neither entered nor
    reported. A directory that cannot be opened or read is reported to
    the error sink and skipped along with everything below it.

    Attributes:
        config: Traversal settings.
        _error_sink: Callable receiving each OSError met during the walk.
        _errors: Errors reported so far, in order.
    """

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        error_sink: Optional[ErrorSink] = None,
    ) -> None:
        """Initialize the DirWalker.

        Args:
            config: Optional ScanConfig. Defaults to ScanConfig().
            error_sink: Optional callable for directory read failures.
                Defaults to logging them as warnings.
        """
        self.config = config if config is not None else ScanConfig()
        self._error_sink = error_sink if error_sink is not None else log_error
        self._errors: List[OSError] = []

    def walk(self, roots: Iterable[ScanRoot]) -> Iterator[str]:
        """Yield source directories from every root, roots in the given order."""
        for root in roots:
            yield from self.walk_root(root)

    def walk_root(self, root: ScanRoot) -> Iterator[str]:
        """Yield source directories under a single root in breadth-first order.

        All directories at one depth are examined before any at the next
        depth. Within a level, directories keep the order in which their
        parents listed them.

        Args:
            root: The root to walk.

        Yields:
            Absolute paths of directories containing source files.
        """
        suffix = self.config.source_suffix
        # Directories to examine in this pass.
        current: List[str] = []
        # Directories to examine in the next pass.
        pending: List[str] = [str(root.src_dir(self.config))]

        while pending:
            current, pending = pending, []
            for directory in current:
                entries = self._read_dir(directory)
                if entries is None:
                    continue

                has_source_files = False
                for entry in entries:
                    name = entry.name
                    try:
                        is_dir = entry.is_dir()
                        is_file = not is_dir and entry.is_file()
                    except OSError as e:
                        self._report(e)
                        continue

                    if is_file:
                        if not has_source_files and name.endswith(suffix):
                            has_source_files = True
                        continue
                    if not is_dir:
                        continue
                    # No .git or other dot directories.
                    if name.startswith("."):
                        continue
                    pending.append(os.path.join(directory, name))

                if has_source_files:
                    yield directory

    def _read_dir(self, directory: str) -> Optional[List[os.DirEntry]]:
        """List a directory's entries, or report the failure and return None."""
        try:
            handle = os.scandir(directory)
        except OSError as e:
            self._report(e)
            return None

        try:
            with handle:
                entries = list(handle)
        except OSError as e:
            self._report(e)
            return None

        if self.config.sort_entries:
            entries.sort(key=lambda entry: entry.name)
        return entries

    def _report(self, error: OSError) -> None:
        self._errors.append(error)
        self._error_sink(error)

    def get_errors(self) -> List[OSError]:
        """Get the errors reported during the walk so far.

        Returns:
            List of OSError instances, oldest first.
        """
        return self._errors.copy()
