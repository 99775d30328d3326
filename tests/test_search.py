"""
Tests for the recursive file search.
"""

import os
import pytest
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from modules.fs_explorer.search import search_tree


@pytest.fixture
def tree(tmp_path):
    """root/{a.txt, sub/a.txt, sub/b.txt}"""
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").touch()
    (root / "sub" / "a.txt").touch()
    (root / "sub" / "b.txt").touch()
    return root


class TestSearchTree:
    """Test search_tree."""

    def test_finds_all_matches(self, tree):
        matches = list(search_tree(str(tree), "a.txt"))

        assert sorted(matches) == sorted([
            os.path.join(str(tree), "a.txt"),
            os.path.join(str(tree), "sub", "a.txt"),
        ])

    def test_no_matches(self, tree):
        assert list(search_tree(str(tree), "missing.txt")) == []

    def test_case_sensitive(self, tree):
        assert list(search_tree(str(tree), "A.TXT")) == []

    def test_directories_are_not_matched(self, tree):
        """A directory's own name is never reported."""
        assert list(search_tree(str(tree), "sub")) == []

    def test_missing_root(self, tmp_path):
        assert list(search_tree(str(tmp_path / "nowhere"), "a.txt")) == []

    def test_deep_tree(self, tmp_path):
        """Deep nesting does not hit the recursion limit."""
        current = str(tmp_path)
        for _ in range(1100):
            current = os.path.join(current, "d")
            os.mkdir(current)
        open(os.path.join(current, "deep.txt"), "x").close()

        matches = list(search_tree(str(tmp_path), "deep.txt"))

        assert len(matches) == 1

    def test_max_depth_limits_descent(self, tree):
        """Only the root is opened with max_depth=1."""
        matches = list(search_tree(str(tree), "a.txt", max_depth=1))

        assert matches == [os.path.join(str(tree), "a.txt")]

    def test_symlink_to_directory_not_followed(self, tree, tmp_path):
        """A symlinked directory is name-compared, never descended into."""
        other = tmp_path / "other"
        other.mkdir()
        (other / "hidden.txt").touch()
        os.symlink(other, tree / "link")

        assert list(search_tree(str(tree), "hidden.txt")) == []
        assert list(search_tree(str(tree), "link")) == [os.path.join(str(tree), "link")]

    def test_symlink_cycle_terminates(self, tree):
        """A link back to the root is not walked."""
        os.symlink(tree, tree / "sub" / "loop")

        assert len(list(search_tree(str(tree), "a.txt"))) == 2

    def test_unreadable_directory_skipped(self, tree, monkeypatch):
        """An unreadable subtree is skipped while siblings are still walked."""
        locked = tree / "locked"
        locked.mkdir()
        (locked / "a.txt").touch()
        sibling = tree / "zzz"
        sibling.mkdir()
        (sibling / "a.txt").touch()

        from modules.fs_explorer import search
        real_scandir = os.scandir

        def refusing_scandir(path, *args, **kwargs):
            if str(path) == str(locked):
                raise PermissionError(13, "Permission denied", path)
            return real_scandir(path, *args, **kwargs)

        monkeypatch.setattr(search.os, "scandir", refusing_scandir)

        matches = list(search_tree(str(tree), "a.txt"))

        assert os.path.join(str(locked), "a.txt") not in matches
        assert os.path.join(str(sibling), "a.txt") in matches
        assert len(matches) == 3

    def test_unreadable_root(self, tree, monkeypatch):
        """A root that cannot be opened yields nothing and raises nothing."""
        from modules.fs_explorer import search

        def refusing_scandir(path, *args, **kwargs):
            raise PermissionError(13, "Permission denied", path)

        monkeypatch.setattr(search.os, "scandir", refusing_scandir)

        assert list(search_tree(str(tree), "a.txt")) == []

    def test_abandoned_generator_closes(self, tree):
        """Stopping early closes the open directory iterators."""
        results = search_tree(str(tree), "a.txt")
        first = next(results)
        results.close()

        assert first.endswith("a.txt")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
