"""
File operations module for Explorer.

Provides the listing, create, delete, change-directory and search operations
behind the interactive menu. Each operation reports to the console and
returns instead of raising, so the menu can always continue.
"""

import os
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from core.config import ExplorerConfig
from core.errors import ErrorKind, FsError
from core.logger import AuditLogger, ActionType, ActionStatus

from .listing import FileStatus, RULE, displayable, format_row, header_row, list_names
from .search import search_tree
from .workspace import Workspace


class FileExplorer:
    """Filesystem operations against a workspace directory."""

    def __init__(
        self,
        workspace: Workspace,
        console: Optional[Console] = None,
        logger: Optional[AuditLogger] = None,
        config: Optional[ExplorerConfig] = None
    ):
        """
        Initialize FileExplorer.

        Args:
            workspace: Directory context operations resolve names against
            console: Console to report to
            logger: Audit logger instance (default: disabled)
            config: Explorer settings (default: built-in defaults)
        """
        self.workspace = workspace
        self.console = console or Console()
        self.logger = logger or AuditLogger(enabled=False)
        self.config = config or ExplorerConfig()

    def _say(self, message: str, style: Optional[str] = None) -> None:
        # Names come from the filesystem; never interpret them as markup
        self.console.print(
            Text(displayable(message, self.console.encoding), style=style or ""),
            highlight=False,
            soft_wrap=True
        )

    def _fail(self, action_type: ActionType, target: str, message: str, exc: OSError) -> FsError:
        error = FsError.from_os_error(exc)
        self._say(f"{message}: {error}", style="red")
        self.logger.log_action(
            action_type=action_type,
            target=target,
            status=ActionStatus.FAILED,
            result=error.message,
            metadata={"kind": error.kind.value}
        )
        return error

    def list_files(self, detailed: bool = False) -> bool:
        """
        List the workspace directory.

        Args:
            detailed: If True, show permissions, owner, group, size and
                modification time for each entry

        Returns:
            True if the directory could be read, False otherwise
        """
        path = self.workspace.path

        try:
            names = list_names(path)
        except OSError as e:
            self._fail(ActionType.LIST, path, f"Cannot open directory {path}", e)
            return False

        if detailed:
            self._say(header_row(), style="bold")
            self._say(RULE)
        else:
            self._say(f"\nContents of {path}:")

        for name in names:
            if detailed:
                self.describe(path, name)
            else:
                self._say(f"  - {name}")

        self.logger.log_action(
            action_type=ActionType.LIST,
            target=path,
            result=f"{len(names)} entries",
            metadata={"detailed": detailed}
        )
        return True

    def describe(self, directory: str, name: str) -> bool:
        """
        Print the detailed row for one entry.

        A failure is reported for this entry only.

        Returns:
            True if the entry could be stat'ed, False otherwise
        """
        try:
            status = FileStatus.from_path(directory, name)
        except OSError as e:
            error = FsError.from_os_error(e)
            self._say(f"  [stat error] {name} : {error}", style="red")
            self.logger.log_action(
                action_type=ActionType.STAT,
                target=name,
                status=ActionStatus.FAILED,
                result=error.message,
                metadata={"kind": error.kind.value}
            )
            return False

        self._say(format_row(status, self.config.time_format))
        return True

    def create_file(self, name: str) -> bool:
        """
        Create a new empty file.

        An existing file is never truncated.

        Args:
            name: File name, relative to the workspace or absolute

        Returns:
            True if the file was created, False otherwise
        """
        path = self.workspace.resolve(name)

        try:
            with open(path, "x"):
                pass
        except OSError as e:
            error = FsError.from_os_error(e)
            if error.kind is ErrorKind.ALREADY_EXISTS:
                self._say(f"File already exists: {name}", style="yellow")
                self.logger.log_action(
                    action_type=ActionType.CREATE,
                    target=path,
                    status=ActionStatus.FAILED,
                    result=error.message,
                    metadata={"kind": error.kind.value}
                )
            else:
                self._fail(ActionType.CREATE, path, "Create failed", e)
            return False

        self._say(f"File created: {name}", style="green")
        self.logger.log_action(action_type=ActionType.CREATE, target=path)
        return True

    def delete_file(self, name: str) -> bool:
        """
        Delete a single file.

        Directories are not removed.

        Args:
            name: File name, relative to the workspace or absolute

        Returns:
            True if the file was deleted, False otherwise
        """
        path = self.workspace.resolve(name)

        try:
            os.unlink(path)
        except OSError as e:
            self._fail(ActionType.DELETE, path, "Delete failed", e)
            return False

        self._say(f"Deleted: {name}", style="green")
        self.logger.log_action(action_type=ActionType.DELETE, target=path)
        return True

    def change_directory(self, path: str) -> bool:
        """
        Change the workspace directory.

        On failure the workspace is left where it was.

        Args:
            path: Absolute path, or path relative to the workspace

        Returns:
            True if the directory changed, False otherwise
        """
        try:
            new_path = self.workspace.change_directory(path)
        except OSError as e:
            self._fail(ActionType.CHDIR, path, "Change directory failed", e)
            return False

        self._say(f"Changed directory to: {new_path}", style="green")
        self.logger.log_action(
            action_type=ActionType.CHDIR,
            target=path,
            result=new_path
        )
        return True

    def search_file(self, name: str) -> List[str]:
        """
        Search the workspace tree for files named exactly ``name``.

        Unreadable directories are skipped without comment.

        Args:
            name: Exact file name to find

        Returns:
            Paths of all matches, in the order they were found
        """
        self._say("Searching (this may take time for large trees)...", style="dim")

        matches = []
        for match in search_tree(self.workspace.path, name, max_depth=self.config.max_depth):
            matches.append(match)
            self._say(f"Found: {match}")

        self._say(f"{len(matches)} match(es) for {name}", style="dim")
        self.logger.log_action(
            action_type=ActionType.SEARCH,
            target=name,
            result=f"{len(matches)} matches",
            metadata={"root": self.workspace.path}
        )
        return matches
