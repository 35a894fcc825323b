#
# create_file.py
# Lockfile Guard
#
# Creates empty files atomically and exclusively, flushing content and metadata before returning.
#
# Thales Matheus Mendonça Santos - November 2025
#
"""Exclusive, durable creation of empty marker files."""
from __future__ import annotations

import errno
import os

from .config import DEFAULT_SETTINGS, LockfileSettings


def open_flags(settings: LockfileSettings = DEFAULT_SETTINGS) -> int:
    """Return the ``os.open`` flags used to create a lock file.

    Create-if-absent and fail-if-present are requested together so the
    existence check and the creation are a single filesystem operation.
    Flags the platform does not define are left out.
    """
    flags = os.O_CREAT | os.O_EXCL | os.O_WRONLY | getattr(os, "O_CLOEXEC", 0)
    if settings.durable:
        flags |= getattr(os, "O_DSYNC", 0)
    if settings.direct_io:
        flags |= getattr(os, "O_DIRECT", 0)
    return flags


def _sync_directory(directory: str):
    # Directories cannot be opened for fsync on Windows.
    if os.name == "nt":
        return
    fd = os.open(directory, os.O_RDONLY | getattr(os, "O_DIRECTORY", 0))
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def _discard(path: str):
    # Cleanup only; the error that triggered it is the one callers see.
    try:
        os.unlink(path)
    except OSError:
        pass


def create_file_exclusive(path, settings: LockfileSettings = DEFAULT_SETTINGS) -> None:
    """
    Create an empty file at ``path``, failing if anything already exists there.

    Raises ``FileExistsError`` when the path is taken and the plain ``OSError``
    from ``os.open`` for every other failure (missing parent, permissions...).
    Errors are not wrapped; callers classify them by ``errno``. No file is
    left behind on failure.
    """
    path = os.fspath(path)
    try:
        fd = os.open(path, open_flags(settings), settings.file_mode)
    except OSError as e:
        # Linux may create the inode before rejecting O_DIRECT with EINVAL.
        # O_EXCL got that far, so the file is ours to remove.
        if settings.direct_io and e.errno == errno.EINVAL:
            _discard(path)
        raise
    try:
        try:
            if settings.durable:
                os.fsync(fd)
        finally:
            os.close(fd)
        if settings.sync_parent_dir:
            _sync_directory(os.path.dirname(os.path.abspath(path)))
    except OSError:
        # A file that could not be made durable must not be left behind.
        _discard(path)
        raise


__all__ = ["create_file_exclusive", "open_flags"]
