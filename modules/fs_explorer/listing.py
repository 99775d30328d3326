"""
Directory listing and metadata rows.
"""

import grp
import os
import pwd
import stat
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import List

from core.config import DEFAULT_TIME_FORMAT


# (bit, character) for owner, group and other, in display order
_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
)

COLUMN_WIDTHS = (12, 8, 8, 10, 20)
HEADER_TITLES = ("PERMISSIONS", "OWNER", "GROUP", "SIZE", "MODIFIED")
RULE = "-" * 80


def displayable(text: str, encoding: str = "utf-8") -> str:
    """
    Make a string safe to write to a stream in ``encoding``.

    Bytes of file names that are not valid in the filesystem encoding come
    back from the OS as lone surrogates; they are shown as ``\\xNN`` escapes
    instead. Characters the stream cannot encode are escaped the same way.
    """
    try:
        raw = os.fsencode(text)
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "backslashreplace")
    decoded = raw.decode(sys.getfilesystemencoding(), "backslashreplace")
    return decoded.encode(encoding, "backslashreplace").decode(encoding)


def list_names(path: str) -> List[str]:
    """
    Names of the immediate children of a directory.

    Sorted by byte value of the encoded name, so ordering does not depend
    on locale.

    Raises:
        OSError: If the directory cannot be opened or read
    """
    with os.scandir(path) as it:
        names = [entry.name for entry in it]
    return sorted(names, key=os.fsencode)


def format_permissions(mode: int) -> str:
    """Render a mode as a 10-character string such as ``drwxr-xr--``."""
    if stat.S_ISDIR(mode):
        kind = "d"
    elif stat.S_ISLNK(mode):
        kind = "l"
    else:
        kind = "-"
    return kind + "".join(ch if mode & bit else "-" for bit, ch in _PERMISSION_BITS)


def _owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


@dataclass
class FileStatus:
    """Status snapshot of one directory entry."""
    name: str
    mode: int
    uid: int
    gid: int
    owner: str
    group: str
    size: int
    mtime: float

    @classmethod
    def from_path(cls, directory: str, name: str) -> "FileStatus":
        """
        Read the status of ``directory/name`` without following symlinks.

        Raises:
            OSError: If the entry cannot be stat'ed
        """
        st = os.lstat(os.path.join(directory, name))
        return cls(
            name=name,
            mode=st.st_mode,
            uid=st.st_uid,
            gid=st.st_gid,
            owner=_owner_name(st.st_uid),
            group=_group_name(st.st_gid),
            size=st.st_size,
            mtime=st.st_mtime
        )

    @property
    def permissions(self) -> str:
        return format_permissions(self.mode)

    def modified(self, time_format: str = DEFAULT_TIME_FORMAT) -> str:
        """
        Modification time in local time.

        Times the platform cannot represent as a date are shown as raw
        seconds since the epoch.
        """
        try:
            return datetime.fromtimestamp(self.mtime).strftime(time_format)
        except (ValueError, OverflowError, OSError):
            return f"{self.mtime:.0f}"


def _pad(values) -> str:
    return "".join(f"{value:<{width}}" for value, width in zip(values, COLUMN_WIDTHS))


def header_row() -> str:
    """Column header for the detailed listing."""
    return _pad(HEADER_TITLES) + " NAME"


def format_row(status: FileStatus, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """One fixed-width row of the detailed listing."""
    values = (
        status.permissions,
        status.owner,
        status.group,
        str(status.size),
        status.modified(time_format),
    )
    return _pad(values) + " " + status.name
