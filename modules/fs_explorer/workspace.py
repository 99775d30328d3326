"""
Working directory context for Explorer.

The current directory is an explicit object passed to every operation instead
of the process-wide working directory, so operations can be exercised against
any base path.
"""

import errno
import os
import stat
from typing import Optional


class Workspace:
    """The directory relative names resolve against."""

    def __init__(self, path: Optional[str] = None, bind_process: bool = False):
        """
        Initialize the workspace.

        Args:
            path: Starting directory (default: the process working directory)
            bind_process: If True, directory changes also change the process
                working directory
        """
        self.path = os.path.realpath(path if path is not None else os.getcwd())
        self.bind_process = bind_process

    def resolve(self, name: str) -> str:
        """Resolve a name against the workspace; absolute names pass through."""
        return os.path.join(self.path, name)

    def change_directory(self, path: str) -> str:
        """
        Make ``path`` the workspace directory.

        Args:
            path: Absolute path, or path relative to the current directory

        Returns:
            The new absolute directory, with symlinks resolved

        Raises:
            FileNotFoundError: If the path doesn't exist
            NotADirectoryError: If the path is not a directory
            PermissionError: If the directory cannot be entered
        """
        candidate = self.resolve(path)

        st = os.stat(candidate)
        if not stat.S_ISDIR(st.st_mode):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        if not os.access(candidate, os.X_OK):
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)

        resolved = os.path.realpath(candidate)
        if self.bind_process:
            os.chdir(resolved)
        self.path = resolved
        return resolved
