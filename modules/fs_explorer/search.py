"""
Recursive search for a file by exact name.
"""

import os
from typing import Iterator, Optional


def _is_directory(entry: os.DirEntry) -> bool:
    # Trusts the type reported by the directory read; symlinks are not followed
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def search_tree(root: str, target: str, max_depth: Optional[int] = None) -> Iterator[str]:
    """
    Walk the tree under ``root`` depth-first and yield the path of every
    entry named ``target``.

    Entries are visited in the order the directory read returns them. A
    directory that cannot be opened is skipped along with everything under
    it, without reporting anything. Directory entries are descended into
    and never matched themselves; every other entry, including a symlink to
    a directory, is compared by exact name.

    Args:
        root: Directory to start from
        target: Exact, case-sensitive file name to look for
        max_depth: Maximum number of directory levels to open, counting
            ``root`` as level 1 (default: unlimited)

    Yields:
        Full path of each match, joined onto ``root``
    """
    try:
        top = os.scandir(root)
    except OSError:
        return

    stack = [(root, top)]
    try:
        while stack:
            dirname, it = stack[-1]
            try:
                entry = next(it)
            except StopIteration:
                it.close()
                stack.pop()
                continue
            except OSError:
                # Directory became unreadable mid-walk; drop the rest of it
                it.close()
                stack.pop()
                continue

            full = os.path.join(dirname, entry.name)

            if _is_directory(entry):
                if max_depth is not None and len(stack) >= max_depth:
                    continue
                try:
                    child = os.scandir(full)
                except OSError:
                    continue
                stack.append((full, child))
            elif entry.name == target:
                yield full
    finally:
        for _, it in stack:
            it.close()
