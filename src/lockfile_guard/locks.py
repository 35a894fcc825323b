#
# locks.py
# Lockfile Guard
#
# Implements the lockfile protocol: acquire by exclusive creation, run the critical section, always release.
#
# Thales Matheus Mendonça Santos - November 2025
#
"""Lockfile acquire/execute/release helpers."""
from __future__ import annotations

import errno
import logging
import os
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from .config import DEFAULT_SETTINGS, LockfileSettings
from .create_file import create_file_exclusive
from .errors import (
    LockAcquisitionError,
    LockAlreadyExistsError,
    LockOutcome,
    LockReleaseError,
)

T = TypeVar("T")


def _acquire(path: str, settings: LockfileSettings, log: logging.Logger):
    try:
        create_file_exclusive(path, settings)
    except OSError as e:
        if e.errno == errno.EEXIST:
            log.debug("Lockfile %s already exists; not acquired.", path)
            raise LockAlreadyExistsError(path) from None
        log.debug("Could not acquire lockfile %s: %s", path, e)
        raise LockAcquisitionError(path, e) from e
    log.debug("Acquired lockfile %s", path)


def _release(path: str, suppressed: Optional[BaseException], log: logging.Logger):
    try:
        os.unlink(path)
    except OSError as e:
        log.debug("Could not release lockfile %s: %s (it may need to be removed by hand)", path, e)
        raise LockReleaseError(path, e, suppressed) from e
    log.debug("Released lockfile %s", path)


@contextmanager
def hold_lockfile(
    path,
    settings: LockfileSettings = DEFAULT_SETTINGS,
    logger: Optional[logging.Logger] = None,
) -> Iterator[str]:
    """
    Hold ``path`` as a lockfile for the duration of the ``with`` block.

    Raises ``LockAlreadyExistsError`` or ``LockAcquisitionError`` before the
    block runs when the file cannot be created. Once the block finishes, the
    file is removed exactly once; if that fails, ``LockReleaseError`` is
    raised in place of whatever the block raised.
    """
    log = logger or logging.getLogger(settings.logger_name)
    path = os.fspath(path)
    _acquire(path, settings, log)

    error: Optional[BaseException] = None
    try:
        yield path
    except BaseException as e:
        error = e
        raise
    finally:
        _release(path, error, log)


def with_lockfile(
    path,
    critical_section: Callable[[], T],
    settings: LockfileSettings = DEFAULT_SETTINGS,
    logger: Optional[logging.Logger] = None,
) -> T:
    """
    Call ``critical_section`` if and only if the lockfile at ``path`` is acquired.

    Returns whatever ``critical_section`` returns. Exceptions it raises are
    re-raised unchanged after the lockfile is removed, unless the removal
    itself fails (e.g. someone deleted the file), in which case
    ``LockReleaseError`` wins. Depending on the critical section, callers may
    ignore that error, recover from it, or report it.
    """
    log = logger or logging.getLogger(settings.logger_name)
    with hold_lockfile(path, settings, log):
        result = critical_section()
    log.debug("Lockfile %s: %s", os.fspath(path), LockOutcome.COMPLETED.value)
    return result


__all__ = ["hold_lockfile", "with_lockfile"]
