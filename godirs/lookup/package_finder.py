"""Resolution of import paths to source directories.

PackageFinder walks the scanner's sequence, restarting it with reset()
for every lookup, so only the first lookup pays for the filesystem walk.

Example:
    >>> from godirs.lookup import PackageFinder
    >>> finder = PackageFinder(dirs)
    >>> match = finder.find("encoding/json")
    >>> if match:
    ...     print(match.dir)
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional

from godirs.models import PackageDir
from godirs.scanning import SourceDirs


class PackageFinder:
    """Looks up packages by import path using a SourceDirs scanner.

    An exact import path match always wins. Failing that, the first
    directory whose import path ends with the requested path (on a
    ``/`` boundary) is returned, so ``json`` finds ``encoding/json``.

    Attributes:
        _dirs: Scanner providing candidate directories.
    """

    def __init__(self, dirs: SourceDirs) -> None:
        self._dirs = dirs

    def find(self, package: str) -> Optional[PackageDir]:
        """Find the best directory for a package.

        Args:
            package: Full or partial import path, e.g. "fmt" or "net/http".

        Returns:
            The exact match if there is one, otherwise the first suffix
            match, otherwise None.

        Raises:
            ValueError: If package is empty.
        """
        wanted = self._normalize(package)
        for candidate in self._candidates():
            if candidate.import_path == wanted:
                return candidate
        for candidate in self._candidates():
            if candidate.import_path.endswith("/" + wanted):
                return candidate
        return None

    def find_all(self, package: str) -> List[PackageDir]:
        """Find every directory matching a package, in discovery order.

        Raises:
            ValueError: If package is empty.
        """
        wanted = self._normalize(package)
        return [
            candidate
            for candidate in self._candidates()
            if candidate.import_path == wanted
            or candidate.import_path.endswith("/" + wanted)
        ]

    @staticmethod
    def _normalize(package: str) -> str:
        wanted = package.strip().strip("/")
        if not wanted:
            raise ValueError("Package name must not be empty")
        return wanted

    def _candidates(self) -> Iterator[PackageDir]:
        """Yield every scanned directory of one pass with its import path."""
        config = self._dirs.config
        src_dirs = [(root, str(root.src_dir(config))) for root in self._dirs.roots]
        for directory in self._dirs:
            for root, src in src_dirs:
                if directory == src or directory.startswith(src + os.sep):
                    relative = Path(os.path.relpath(directory, src)).as_posix()
                    import_path = "" if relative == "." else relative
                    yield PackageDir(dir=directory, import_path=import_path, root=root)
                    break
