"""
Error kinds for Explorer.

Operating system failures are classified into a small set of kinds so callers
can branch on the kind instead of parsing error text.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Kinds of filesystem failure the explorer distinguishes."""
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    NOT_A_DIRECTORY = "not_a_directory"
    OTHER = "other"


_KIND_BY_EXCEPTION = (
    (FileNotFoundError, ErrorKind.NOT_FOUND),
    (PermissionError, ErrorKind.PERMISSION_DENIED),
    (FileExistsError, ErrorKind.ALREADY_EXISTS),
    (NotADirectoryError, ErrorKind.NOT_A_DIRECTORY),
)


@dataclass
class FsError:
    """A classified filesystem failure."""
    kind: ErrorKind
    message: str

    @classmethod
    def from_os_error(cls, exc: OSError) -> "FsError":
        """
        Classify an OSError raised by a filesystem call.

        The message is the operating system's own failure text when there
        is one, otherwise the exception's string form.
        """
        kind = ErrorKind.OTHER
        for exc_type, candidate in _KIND_BY_EXCEPTION:
            if isinstance(exc, exc_type):
                kind = candidate
                break

        return cls(
            kind=kind,
            message=exc.strerror or str(exc)
        )

    def __str__(self) -> str:
        return self.message
