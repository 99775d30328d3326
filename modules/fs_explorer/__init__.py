"""
Filesystem explorer module for Explorer.

Provides directory listing, file creation and deletion, directory changes and
recursive search, driven by an interactive menu.
"""

from .file_ops import FileExplorer
from .listing import FileStatus, format_permissions, list_names
from .menu import MenuLoop, TokenReader
from .search import search_tree
from .workspace import Workspace

__all__ = [
    'FileExplorer',
    'FileStatus',
    'format_permissions',
    'list_names',
    'MenuLoop',
    'TokenReader',
    'search_tree',
    'Workspace',
]
