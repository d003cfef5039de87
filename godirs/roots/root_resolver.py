"""Resolution of the roots the scanner walks.

The primary root is the Go installation tree (GOROOT). Additional roots
come from a GOPATH style list separated by the platform's path-list
separator.

Example:
    >>> from godirs.roots import build_roots
    >>> roots = build_roots("/usr/local/go", "/home/me/go:/opt/gocode")
    >>> [str(r.path) for r in roots]
    ['/usr/local/go', '/home/me/go', '/opt/gocode']
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from godirs.models import ScanRoot

logger = logging.getLogger("godirs.roots")

# Seconds to wait for `go env` before giving up.
GO_ENV_TIMEOUT = 10


def split_path_list(value: Optional[str]) -> List[str]:
    """Split a path list on os.pathsep.

    Empty entries are discarded. Order is preserved and duplicates are
    kept.

    Args:
        value: The raw path list, e.g. the contents of $GOPATH.

    Returns:
        List of non-empty path strings.
    """
    if not value:
        return []
    return [entry for entry in value.split(os.pathsep) if entry]


def _go_env(name: str) -> Optional[str]:
    """Ask the go tool for an environment value, or None if unavailable."""
    go = shutil.which("go")
    if go is None:
        return None
    try:
        result = subprocess.run(
            [go, "env", name],
            capture_output=True,
            text=True,
            timeout=GO_ENV_TIMEOUT,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("go env %s failed: %s", name, e)
        return None
    value = result.stdout.strip()
    return value or None


def resolve_goroot(explicit: Optional[str] = None) -> Optional[str]:
    """Resolve the primary root.

    Checks, in order: the explicit value, $GOROOT, then `go env GOROOT`.

    Returns:
        The GOROOT path, or None if it cannot be determined.
    """
    if explicit:
        return explicit
    env_value = os.environ.get("GOROOT")
    if env_value:
        return env_value
    return _go_env("GOROOT")


def resolve_gopath(
    explicit: Optional[str] = None, goroot: Optional[str] = None
) -> str:
    """Resolve the additional roots as a raw path list.

    Uses the explicit value, then $GOPATH. When neither is set, falls back
    to ~/go unless that directory is the GOROOT itself.

    Returns:
        A path-list string, possibly empty.
    """
    if explicit:
        return explicit
    env_value = os.environ.get("GOPATH")
    if env_value:
        return env_value
    default = Path.home() / "go"
    if goroot and Path(goroot) == default:
        return ""
    return str(default)


def build_roots(goroot: Optional[str], gopath: Optional[str]) -> List[ScanRoot]:
    """Build the ordered roots: GOROOT first, then each GOPATH entry.

    Args:
        goroot: Primary root, or None to omit it.
        gopath: Path list of additional roots.

    Returns:
        List of ScanRoot in walk order.
    """
    roots: List[ScanRoot] = []
    if goroot:
        roots.append(ScanRoot(path=Path(goroot), primary=True))
    for entry in split_path_list(gopath):
        roots.append(ScanRoot(path=Path(entry)))
    logger.debug("Scan roots: %s", ", ".join(str(r.path) for r in roots))
    return roots
