# Explorer - Core Module
"""
Core infrastructure for the Explorer console tool.
This module provides the configuration, audit logging and error kinds the
filesystem operations depend on.
"""

from .config import ExplorerConfig, load_config
from .errors import ErrorKind, FsError
from .logger import AuditLogger, AuditEntry, ActionType, ActionStatus

__all__ = [
    "ExplorerConfig",
    "load_config",
    "ErrorKind",
    "FsError",
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
]

__version__ = "0.1.0"
