"""Root resolution package for godirs.

Turns GOROOT/GOPATH style settings into the ordered list of ScanRoot
objects the scanner walks.
"""

from .root_resolver import (
    build_roots,
    resolve_gopath,
    resolve_goroot,
    split_path_list,
)

__all__ = ["build_roots", "resolve_gopath", "resolve_goroot", "split_path_list"]
