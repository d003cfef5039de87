"""Lazy, cached scanner of source directories.

SourceDirs hands out source directories one at a time. The filesystem is
walked exactly once, by a background thread that stays at most one
directory ahead of the consumer; everything it delivers is cached so the
consumer can reset() and replay the sequence without touching the disk
again.

Example:
    >>> from godirs.scanning import start_dirs
    >>> dirs = start_dirs(roots)
    >>> while True:
    ...     path, ok = dirs.next()
    ...     if not ok:
    ...         break
    ...     print(path)
    >>> dirs.reset()  # the next pass is served from the cache
"""

import logging
import threading
from typing import Iterable, Iterator, List, Optional, Tuple

from godirs.models import ScanConfig, ScanRoot

from .dir_walker import DirWalker, ErrorSink
from .handoff import Handoff

logger = logging.getLogger("godirs.scanning")


class SourceDirs:
    """Scans root hierarchies for source directories, walking them only once.

    The walker thread is started by the constructor and runs for the life
    of the process. It blocks on each delivery until the consumer asks for
    the next directory. Only a single consumer is supported: next() and
    reset() must not be called concurrently.

    Attributes:
        _roots: Roots to walk, in order.
        _walker: DirWalker producing the directories.
        _scan: Handoff carrying directories from the walker thread.
        _paths: Cache of directories delivered so far.
        _offset: Read cursor into _paths.
    """

    def __init__(
        self,
        roots: Iterable[ScanRoot],
        config: Optional[ScanConfig] = None,
        error_sink: Optional[ErrorSink] = None,
    ) -> None:
        """Initialize the scanner and start walking.

        Args:
            roots: Roots to walk, primary root first.
            config: Optional ScanConfig. Defaults to ScanConfig().
            error_sink: Optional callable receiving directory read failures.
        """
        self._roots: List[ScanRoot] = list(roots)
        self._walker = DirWalker(config, error_sink)
        self._scan: Handoff[str] = Handoff()
        self._paths: List[str] = []
        self._offset = 0

        self._thread = threading.Thread(
            target=self._walk, name="godirs-walker", daemon=True
        )
        self._thread.start()

    def _walk(self) -> None:
        """Deliver every source directory over the handoff, then close it."""
        try:
            for directory in self._walker.walk(self._roots):
                self._scan.send(directory)
        except Exception:
            logger.exception("Source directory walk aborted")
        finally:
            self._scan.close()
            logger.debug("Source directory walk finished")

    def reset(self) -> None:
        """Put the scan back at the beginning."""
        self._offset = 0

    def next(self) -> Tuple[str, bool]:
        """Return the next directory in the scan.

        Cached directories are served without blocking. Past the end of
        the cache, waits for the walker to deliver one more directory.

        Returns:
            (path, True) for the next directory, ("", False) when the scan
            is done.
        """
        if self._offset < len(self._paths):
            path = self._paths[self._offset]
            self._offset += 1
            return path, True

        path, ok = self._scan.receive()
        if not ok or path is None:
            return "", False
        self._paths.append(path)
        self._offset += 1
        return path, True

    def __iter__(self) -> Iterator[str]:
        """Reset and yield every directory of one full pass."""
        self.reset()
        while True:
            path, ok = self.next()
            if not ok:
                return
            yield path

    @property
    def roots(self) -> List[ScanRoot]:
        """The roots being walked, in order."""
        return self._roots.copy()

    @property
    def config(self) -> ScanConfig:
        """The traversal settings in use."""
        return self._walker.config

    @property
    def paths(self) -> List[str]:
        """Copy of the directories cached so far."""
        return self._paths.copy()

    @property
    def offset(self) -> int:
        """Current read cursor."""
        return self._offset

    def get_errors(self) -> List[OSError]:
        """Get the directory read failures reported by the walker so far."""
        return self._walker.get_errors()


# Process-wide scanner, created once at program start.
_dirs: Optional[SourceDirs] = None
_dirs_lock = threading.Lock()


def start_dirs(
    roots: Iterable[ScanRoot], config: Optional[ScanConfig] = None
) -> SourceDirs:
    """Create and start the process-wide scanner.

    Only the first call creates the scanner; later calls return it
    unchanged.

    Args:
        roots: Roots to walk, primary root first.
        config: Optional ScanConfig.

    Returns:
        The process-wide SourceDirs.
    """
    global _dirs
    with _dirs_lock:
        if _dirs is None:
            _dirs = SourceDirs(roots, config)
        return _dirs


def get_dirs() -> SourceDirs:
    """Return the process-wide scanner.

    Raises:
        RuntimeError: If start_dirs() has not been called.
    """
    if _dirs is None:
        raise RuntimeError("Source directory scan has not been started")
    return _dirs
