#
# errors.py
# Lockfile Guard
#
# Declares the closed set of lock outcomes and the exceptions raised when a lockfile cannot be acquired or released.
#
# Thales Matheus Mendonça Santos - November 2025
#
"""Lock outcomes and the lockfile error taxonomy.

Every error carries the lock ``path``. Acquisition and release failures also
carry the low-level ``cause`` (the ``OSError`` from the filesystem), which is
chained as ``__cause__`` as well. ``LockAlreadyExistsError`` wraps nothing:
it reports contention, not a system failure.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class LockOutcome(Enum):
    COMPLETED = "acquired-and-completed"
    ALREADY_LOCKED = "already-locked"
    ACQUISITION_FAILED = "acquisition-failed"
    RELEASE_FAILED = "release-failed"


class LockfileError(Exception):
    """Base class; only the three subclasses below are ever raised."""

    outcome: LockOutcome

    def __init__(self, message: str, path: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class LockAlreadyExistsError(LockfileError):
    """The lockfile was already present, so it was not acquired."""

    outcome = LockOutcome.ALREADY_LOCKED

    def __init__(self, path: str):
        super().__init__(f"Lockfile {path} already exists", path)


class LockAcquisitionError(LockfileError):
    """The lockfile did not exist but could not be created."""

    outcome = LockOutcome.ACQUISITION_FAILED

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Could not acquire lockfile {path}: {cause}", path, cause)


class LockReleaseError(LockfileError):
    """
    The lockfile could not be removed after the critical section ran.

    This error replaces any exception raised by the critical section; that
    exception is kept in ``suppressed`` for diagnostics. The lockfile may
    still be on disk and need manual removal.
    """

    outcome = LockOutcome.RELEASE_FAILED

    def __init__(self, path: str, cause: BaseException, suppressed: Optional[BaseException] = None):
        super().__init__(f"Could not release lockfile {path}: {cause}", path, cause)
        self.suppressed = suppressed


__all__ = [
    "LockOutcome",
    "LockfileError",
    "LockAlreadyExistsError",
    "LockAcquisitionError",
    "LockReleaseError",
]
