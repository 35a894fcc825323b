#
# __init__.py
# Lockfile Guard
#
# Package initializer exporting the lockfile protocol, its error taxonomy and the settings dataclass.
#
# Thales Matheus Mendonça Santos - November 2025
#
"""Cross-process mutual exclusion using a lockfile path as the token."""
import logging

from .config import DEFAULT_SETTINGS, LockfileSettings
from .create_file import create_file_exclusive
from .errors import (
    LockAcquisitionError,
    LockAlreadyExistsError,
    LockfileError,
    LockOutcome,
    LockReleaseError,
)
from .locks import hold_lockfile, with_lockfile
from .logging_setup import setup_logging

# Silent unless the host program configures logging.
logging.getLogger(DEFAULT_SETTINGS.logger_name).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_SETTINGS",
    "LockfileSettings",
    "create_file_exclusive",
    "LockOutcome",
    "LockfileError",
    "LockAlreadyExistsError",
    "LockAcquisitionError",
    "LockReleaseError",
    "hold_lockfile",
    "with_lockfile",
    "setup_logging",
]
