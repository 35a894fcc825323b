#
# config.py
# Lockfile Guard
#
# Defines the settings dataclass controlling how lock files are created and how the optional logging is wired.
#
# Thales Matheus Mendonça Santos - November 2025
#
"""Configuration objects for lockfile creation and logging.

A LockfileSettings instance is passed down to the creator and coordinator.
Nothing is read from the environment; callers build their own instance when
the defaults do not fit (e.g. disabling durability in throwaway test dirs).
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class LockfileSettings:
    durable: bool = True  # O_DSYNC + fsync before returning
    direct_io: bool = False  # O_DIRECT; rejected by some filesystems
    sync_parent_dir: bool = True
    file_mode: int = 0o644
    logger_name: str = "lockfile_guard"
    log_file: Optional[Path] = None
    log_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_backup_count: int = 3

    def __post_init__(self):
        # Normalize inputs to Path objects even when callers pass strings.
        if self.log_file is not None:
            self.log_file = Path(self.log_file)


DEFAULT_SETTINGS = LockfileSettings()
