"""Tests for the directory walk that fills the index."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from spotfind.search import NameIndex, build_index, walk_files


def _can_symlink() -> bool:
    with tempfile.TemporaryDirectory() as tmp:
        try:
            os.symlink(tmp, os.path.join(tmp, "probe"))
        except (OSError, NotImplementedError):
            return False
    return True


class WalkFilesTests(unittest.TestCase):
    def test_yields_every_regular_file_with_full_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("a", encoding="utf-8")
            (root / ".hidden").write_text("h", encoding="utf-8")
            (root / "src" / "pkg").mkdir(parents=True)
            (root / "src" / "b.py").write_text("b", encoding="utf-8")
            (root / "src" / "pkg" / "c.py").write_text("c", encoding="utf-8")
            (root / "empty").mkdir()

            pairs = sorted(walk_files(root))

        self.assertEqual(
            pairs,
            sorted(
                [
                    ("a.txt", str(root / "a.txt")),
                    (".hidden", str(root / ".hidden")),
                    ("b.py", str(root / "src" / "b.py")),
                    ("c.py", str(root / "src" / "pkg" / "c.py")),
                ]
            ),
        )

    def test_missing_root_yields_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(list(walk_files(Path(tmp) / "missing")), [])

    def test_unreadable_directory_is_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "ok.txt").write_text("ok", encoding="utf-8")
            (root / "locked").mkdir()
            (root / "locked" / "secret.txt").write_text("s", encoding="utf-8")
            real_scandir = os.scandir

            def fake_scandir(path):
                if os.fspath(path).endswith("locked"):
                    raise PermissionError(13, "Permission denied", os.fspath(path))
                return real_scandir(path)

            with mock.patch("spotfind.search.traversal.os.scandir", side_effect=fake_scandir):
                names = [name for name, _ in walk_files(root)]

        self.assertEqual(names, ["ok.txt"])

    @unittest.skipUnless(_can_symlink(), "symlinks not supported")
    def test_dangling_symlink_is_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real.txt").write_text("r", encoding="utf-8")
            os.symlink(root / "gone.txt", root / "broken.txt")

            names = [name for name, _ in walk_files(root)]

        self.assertEqual(names, ["real.txt"])

    @unittest.skipUnless(_can_symlink(), "symlinks not supported")
    def test_symlink_cycle_terminates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "sub" / "f.txt").write_text("f", encoding="utf-8")
            os.symlink(root, root / "sub" / "loop", target_is_directory=True)

            names = [name for name, _ in walk_files(root)]

        self.assertEqual(names, ["f.txt"])

    @unittest.skipUnless(_can_symlink(), "symlinks not supported")
    def test_symlinked_file_is_indexed(self) -> None:
        with tempfile.TemporaryDirectory() as outside, tempfile.TemporaryDirectory() as tmp:
            target = Path(outside) / "target.txt"
            target.write_text("t", encoding="utf-8")
            os.symlink(target, Path(tmp) / "link.txt")

            names = [name for name, _ in walk_files(tmp)]

        self.assertEqual(names, ["link.txt"])


class BuildIndexTests(unittest.TestCase):
    def test_build_index_counts_every_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for d_idx in range(5):
                sub = root / f"dir_{d_idx}"
                sub.mkdir()
                for f_idx in range(7):
                    (sub / f"file_{f_idx}.txt").write_text("x", encoding="utf-8")

            index = build_index(root)

        self.assertEqual(index.total_files, 35)
        self.assertEqual(sum(index.bucket_lengths().values()), 35)
        self.assertEqual(len(index.lookup("FILE_3.TXT")), 5)

    def test_build_index_fills_given_index(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "x.txt").write_text("x", encoding="utf-8")
            index = NameIndex()

            returned = build_index(tmp, index)

        self.assertIs(returned, index)
        self.assertEqual(index.total_files, 1)

    def test_memory_error_skips_single_insert(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("a.txt", "b.txt", "c.txt"):
                (Path(tmp) / name).write_text("x", encoding="utf-8")
            index = NameIndex()
            real_insert = index.insert

            def flaky_insert(name: str, full_path: str):
                if name == "b.txt":
                    raise MemoryError
                return real_insert(name, full_path)

            with mock.patch.object(index, "insert", side_effect=flaky_insert):
                build_index(tmp, index)

        self.assertEqual(index.total_files, 2)
        self.assertEqual(index.lookup("b.txt"), [])


if __name__ == "__main__":
    unittest.main()
