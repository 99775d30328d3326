"""
Interactive menu for Explorer.

Reads one numeric choice at a time, plus an argument for the options that
need one, and dispatches to the file operations until the user exits.
"""

import re
from collections import deque
from typing import Callable, Deque, Dict, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .file_ops import FileExplorer
from .listing import displayable


EXIT_CHOICE = 7

# Leading decimal integer of a token; the rest stays in the input
_CHOICE_PATTERN = re.compile(r"[+-]?[0-9]+")

MENU_OPTIONS = (
    "1. List files (names only)",
    "2. List files (detailed -> permissions, owner, size, mtime)",
    "3. Create file",
    "4. Delete file",
    "5. Change directory",
    "6. Search file (recursive)",
    "7. Exit",
)


class TokenReader:
    """
    Whitespace-delimited tokens from a line source.

    Tokens may span lines; blank lines are skipped.
    """

    def __init__(self, read_line: Callable[[], str]):
        """
        Args:
            read_line: Returns the next input line, or '' at end of input
        """
        self._read_line = read_line
        self._pending: Deque[str] = deque()

    def next_token(self) -> Optional[str]:
        """Return the next token, or None at end of input."""
        while not self._pending:
            line = self._read_line()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def push_back(self, token: str) -> None:
        """Return a token so it is read next."""
        self._pending.appendleft(token)

    def discard_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self._pending.clear()


class MenuLoop:
    """Menu-driven loop over a FileExplorer."""

    def __init__(self, explorer: FileExplorer, reader: TokenReader, console: Optional[Console] = None):
        self.explorer = explorer
        self.reader = reader
        self.console = console or explorer.console

        # choice -> (argument prompt or None, handler)
        self._actions: Dict[int, Tuple[Optional[str], Callable[..., object]]] = {
            1: (None, lambda: explorer.list_files(detailed=False)),
            2: (None, lambda: explorer.list_files(detailed=True)),
            3: ("Enter filename to create: ", explorer.create_file),
            4: ("Enter filename to delete: ", explorer.delete_file),
            5: ("Enter directory to change to (absolute or relative): ", explorer.change_directory),
            6: ("Enter filename to search for (exact name): ", explorer.search_file),
        }

    def _prompt(self, text: str) -> None:
        self.console.print(text, end="", markup=False, highlight=False)
        self.console.file.flush()

    def _show_menu(self) -> None:
        self.console.print(
            Text(
                displayable(f"\nCurrent Directory: {self.explorer.workspace.path}", self.console.encoding),
                style="bold"
            ),
            highlight=False,
            soft_wrap=True
        )
        for option in MENU_OPTIONS:
            self.console.print(option, markup=False, highlight=False)
        self._prompt("Enter choice: ")

    def step(self) -> bool:
        """
        Run one menu iteration.

        Returns:
            False once the loop should stop, True otherwise
        """
        self._show_menu()

        token = self.reader.next_token()
        if token is None:
            return False

        match = _CHOICE_PATTERN.match(token)
        if match is None:
            self.reader.discard_line()
            self.console.print("[red]Invalid input[/red]")
            return True

        choice = int(match.group())
        if match.end() < len(token):
            self.reader.push_back(token[match.end():])

        if choice == EXIT_CHOICE:
            return False

        if choice not in self._actions:
            self.console.print("[red]Invalid choice[/red]")
            return True

        prompt, handler = self._actions[choice]
        if prompt is None:
            handler()
            return True

        self._prompt(prompt)
        argument = self.reader.next_token()
        if argument is None:
            return False
        handler(argument)
        return True

    def run(self) -> int:
        """
        Loop until the user exits or input ends.

        Returns:
            Process exit status
        """
        self.console.print(Panel.fit(
            "[bold blue]File Explorer Tool[/bold blue]",
            title="Explorer"
        ))

        try:
            while self.step():
                pass
        except KeyboardInterrupt:
            self.console.print()

        self.console.print("[dim]Goodbye![/dim]")
        return 0
