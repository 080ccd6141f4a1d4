import logging
from unittest import mock

import pytest

from git_dir_cache.config import GitCacheConfig


@pytest.fixture
def tmp_lock_file(tmp_path):
    return tmp_path / "repo.lock"


@pytest.fixture(autouse=True)
def patch_get_git_config():
    with mock.patch(
        "git_dir_cache.utils.git._get_git_config",
        return_value={},
    ):
        yield


@pytest.fixture
def gc_config(tmp_path):
    return GitCacheConfig(
        root_dir=tmp_path / "cache",
        clone_mode="bare",
        heartbeat_interval=0.05,
        lock_expiry=0.5,
        poll_interval=0.01,
    )


@pytest.fixture
def reset_package_logger():
    yield
    package_logger = logging.getLogger("git_dir_cache")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
