"""Small filesystem helpers: directory creation, listing and recursive removal."""

from __future__ import annotations

import os
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class FileType(Enum):
    """Kind of a directory entry."""

    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing."""

    name: str
    filetype: FileType


def make_dir(path: PathLike) -> None:
    """Create a single directory with mode 0755; raises OSError on failure."""
    os.mkdir(path, 0o755)


def remove_dir(path: PathLike) -> None:
    """Remove an empty directory; raises OSError on failure."""
    os.rmdir(path)


def have_dir(path: PathLike) -> bool:
    """Return True if *path* exists and is a directory."""
    return os.path.isdir(path)


def list_dir(path: PathLike) -> list[DirEntry]:
    """List the entries of *path*; an unreadable directory gives an empty list."""
    try:
        with os.scandir(path) as entries:
            return [
                DirEntry(
                    entry.name,
                    FileType.DIR
                    if entry.is_dir(follow_symlinks=False)
                    else FileType.FILE,
                )
                for entry in entries
            ]
    except OSError:
        return []


def remove_tree(path: PathLike) -> None:
    """Remove a directory and everything below it, ignoring failures.

    Does nothing if *path* is not a directory.
    """
    if not have_dir(path):
        return
    base = Path(path)
    for entry in list_dir(base):
        child = base / entry.name
        if entry.filetype is FileType.DIR:
            remove_tree(child)
        else:
            with suppress(OSError):
                os.remove(child)
    with suppress(OSError):
        remove_dir(base)