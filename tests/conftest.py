#
# conftest.py
# Lockfile Guard
#
# Creates reusable pytest fixtures: a scratch directory for lockfiles and an isolated logger.
#
# Thales Matheus Mendonça Santos - November 2025
#
import logging

import pytest

from lockfile_guard.config import LockfileSettings


@pytest.fixture
def lock_dir(tmp_path, monkeypatch):
    locks = tmp_path / "locks"
    locks.mkdir()
    # Relative lockfile names resolve inside the scratch directory.
    monkeypatch.chdir(locks)
    return locks


@pytest.fixture
def settings(tmp_path):
    return LockfileSettings(logger_name="lockfile_guard.tests", log_file=tmp_path / "logs" / "locks.log")


@pytest.fixture
def isolated_logger(request):
    logger = logging.getLogger(f"lockfile_guard.tests.{request.node.name}")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
