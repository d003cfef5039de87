"""Tests for SourceDirs: lazy delivery, caching and replay."""

import errno
import logging
import os
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from conftest import create_tree, drain
from godirs.models import ScanConfig, ScanRoot
from godirs.scanning import SourceDirs, get_dirs, start_dirs


class TestSourceDirsScenarios:
    """End-to-end emission order through next()."""

    def test_single_root_flat(self, flat_root: ScanRoot, sorted_config: ScanConfig) -> None:
        """Only the non-hidden source subdirectories are produced."""
        dirs = SourceDirs([flat_root], sorted_config)

        src = flat_root.path / "src"
        assert drain(dirs) == [str(src / "a"), str(src / "b")]

    def test_breadth_first(self, layered_root: ScanRoot, sorted_config: ScanConfig) -> None:
        """Depth 1 is exhausted before depth 2."""
        dirs = SourceDirs([layered_root], sorted_config)

        src = layered_root.path / "src"
        assert drain(dirs) == [str(src / "a"), str(src / "b"), str(src / "a" / "deep")]

    def test_interior_node_without_sources(self, temp_dir: Path) -> None:
        """Only the inner directory holding sources is produced."""
        create_tree(temp_dir / "r1", ["src/a/inner/x.go"])
        dirs = SourceDirs([ScanRoot(path=temp_dir / "r1")])

        assert drain(dirs) == [str(temp_dir / "r1" / "src" / "a" / "inner")]

    def test_multi_root_order(self, temp_dir: Path) -> None:
        """Primary root first, then additional roots in order."""
        create_tree(temp_dir / "r1", ["src/a/x.go"])
        create_tree(temp_dir / "r2", ["src/p/x.go"])
        create_tree(temp_dir / "r3", ["src/q/x.go"])
        roots = [
            ScanRoot(path=temp_dir / "r1", primary=True),
            ScanRoot(path=temp_dir / "r2"),
            ScanRoot(path=temp_dir / "r3"),
        ]

        dirs = SourceDirs(roots)

        assert drain(dirs) == [
            str(temp_dir / "r1" / "src" / "a"),
            str(temp_dir / "r2" / "src" / "p"),
            str(temp_dir / "r3" / "src" / "q"),
        ]

    def test_unreadable_directory(
        self, temp_dir: Path, sorted_config: ScanConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A directory that denies reads is logged and skipped; siblings still appear."""
        create_tree(temp_dir / "r1", ["src/a/x.go", "src/bad/x.go", "src/c/x.go"])
        bad = str(temp_dir / "r1" / "src" / "bad")
        real_scandir = os.scandir

        def fake_scandir(path):
            if os.fspath(path) == bad:
                raise PermissionError(errno.EACCES, "Permission denied", bad)
            return real_scandir(path)

        with caplog.at_level(logging.WARNING, logger="godirs.scanning"):
            with patch("os.scandir", side_effect=fake_scandir):
                dirs = SourceDirs([ScanRoot(path=temp_dir / "r1")], sorted_config)
                result = drain(dirs)

        src = temp_dir / "r1" / "src"
        assert result == [str(src / "a"), str(src / "c")]
        assert any("Permission denied" in r.getMessage() for r in caplog.records)
        assert len(dirs.get_errors()) == 1

    def test_errors_go_to_custom_sink(self, temp_dir: Path) -> None:
        """An explicit error sink receives each failure."""
        errors: List[OSError] = []
        dirs = SourceDirs([ScanRoot(path=temp_dir / "missing")], error_sink=errors.append)

        assert dirs.next() == ("", False)
        assert len(errors) == 1
        assert isinstance(errors[0], FileNotFoundError)

    def test_no_roots(self) -> None:
        """With nothing to walk the scan ends immediately."""
        dirs = SourceDirs([])

        assert dirs.next() == ("", False)


class TestSourceDirsCache:
    """Caching, reset and replay."""

    def test_reset_replays_without_filesystem_reads(
        self, layered_root: ScanRoot, sorted_config: ScanConfig
    ) -> None:
        """A second full pass returns the same sequence with no directory reads."""
        with patch("os.scandir", wraps=os.scandir) as scandir:
            dirs = SourceDirs([layered_root], sorted_config)
            first = drain(dirs)
            reads_after_first_pass = scandir.call_count

            dirs.reset()
            second = drain(dirs)

        assert second == first
        assert reads_after_first_pass == 4
        assert scandir.call_count == reads_after_first_pass

    def test_partial_pass_then_reset(self, layered_root: ScanRoot, sorted_config: ScanConfig) -> None:
        """The k-th value after any reset is the same."""
        dirs = SourceDirs([layered_root], sorted_config)

        first_value, ok = dirs.next()
        assert ok

        dirs.reset()
        full = drain(dirs)
        dirs.reset()
        again = drain(dirs)

        assert full[0] == first_value
        assert again == full

    def test_reset_mid_pass_extends_cache(self, layered_root: ScanRoot, sorted_config: ScanConfig) -> None:
        """After reset, cached values are replayed and then the walk resumes."""
        dirs = SourceDirs([layered_root], sorted_config)
        dirs.next()
        dirs.next()
        assert len(dirs.paths) == 2

        dirs.reset()
        assert dirs.offset == 0
        result = drain(dirs)

        assert len(result) == 3
        assert dirs.paths == result

    def test_reset_before_next(self, flat_root: ScanRoot) -> None:
        """reset() is harmless before anything has been read."""
        dirs = SourceDirs([flat_root])
        dirs.reset()

        assert len(drain(dirs)) == 2

    def test_next_past_end(self, flat_root: ScanRoot) -> None:
        """After the end, next() keeps reporting end-of-stream without side effects."""
        dirs = SourceDirs([flat_root])
        produced = drain(dirs)

        for _ in range(3):
            assert dirs.next() == ("", False)
        assert dirs.paths == produced
        assert dirs.offset == len(produced)

    def test_iteration_is_a_full_pass(self, layered_root: ScanRoot, sorted_config: ScanConfig) -> None:
        """Iterating resets first, so every iteration sees the whole sequence."""
        dirs = SourceDirs([layered_root], sorted_config)
        dirs.next()

        assert list(dirs) == list(dirs)
        assert len(list(dirs)) == 3

    def test_no_duplicates(self, temp_dir: Path) -> None:
        """No directory appears twice in a pass."""
        create_tree(
            temp_dir / "r1",
            [f"src/p{i}/sub{j}/x.go" for i in range(4) for j in range(3)]
            + [f"src/p{i}/x.go" for i in range(4)],
        )
        dirs = SourceDirs([ScanRoot(path=temp_dir / "r1")])

        result = drain(dirs)

        assert len(result) == 16
        assert len(set(result)) == len(result)


class TestSourceDirsLaziness:
    """The walker never runs far ahead of the consumer."""

    def test_walker_waits_for_consumer(self, temp_dir: Path, sorted_config: ScanConfig) -> None:
        """After one next(), only a bounded number of directories have been read."""
        create_tree(temp_dir / "r1", [f"src/d{i:02d}/x.go" for i in range(20)])

        with patch("os.scandir", wraps=os.scandir) as scandir:
            dirs = SourceDirs([ScanRoot(path=temp_dir / "r1")], sorted_config)
            path, ok = dirs.next()

            # src, d00, and at most d01 before the walker blocks again.
            assert ok
            assert path.endswith("d00")
            assert scandir.call_count <= 3

            rest = drain(dirs)

        assert len(rest) == 19
        assert scandir.call_count == 21


class TestProcessScanner:
    """The process-wide scanner."""

    def test_get_dirs_before_start(self) -> None:
        """get_dirs() fails if no scanner was started."""
        with pytest.raises(RuntimeError, match="not been started"):
            get_dirs()

    def test_start_dirs_once(self, flat_root: ScanRoot, temp_dir: Path) -> None:
        """Later start_dirs() calls return the first scanner."""
        first = start_dirs([flat_root])
        second = start_dirs([ScanRoot(path=temp_dir / "other")])

        assert second is first
        assert get_dirs() is first
        assert first.roots == [flat_root]
