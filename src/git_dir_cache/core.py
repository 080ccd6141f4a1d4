import time
from pathlib import Path
from typing import Optional

from git_dir_cache.config import GitCacheConfig
from git_dir_cache.entry import CacheEntry, is_complete_git_dir, remove_entry_from_disk
from git_dir_cache.errors import GitCacheError
from git_dir_cache.git_runner import SubprocessGitRunner
from git_dir_cache.lease_lock import Heartbeat, LeaseLock
from git_dir_cache.protocols import GitRunner
from git_dir_cache.types import CloneMode
from git_dir_cache.utils.logging import get_logger

logger = get_logger(__name__)


def ensure_git_dir(
    config: GitCacheConfig,
    uri: str,
    runner: Optional[GitRunner] = None,
) -> Path:
    """Makes sure a bare clone of `uri` exists in the cache.

    If the repo is already cached, its path is returned right away. Otherwise
    exactly one caller, across all threads and processes sharing the root dir,
    wins the entry's lease lock and clones the repo. Everyone else waits for
    that clone to land.

    Args:
        config: cache root dir, clone mode and lease timings to use
        uri: The URI of the repository to cache.
        runner: runs git for the clone. Defaults to a `SubprocessGitRunner`

    Returns:
        absolute path to the complete bare repository

    Raises:
        CloneFailedError: if our clone failed, or the owner of the lease gave
            it up without producing a repository
        LockExpiredError: if the owner of the lease stopped sending heartbeats
        GitCacheError: of type INVALID_ARGUMENT for an empty uri, or one that names
            no repository path
    """
    if not uri.strip():
        raise GitCacheError.invalid_argument("uri cannot be empty")

    try:
        entry = CacheEntry.from_uri(config.root_dir, uri)
    except ValueError as ex:
        raise GitCacheError.invalid_argument(str(ex)) from ex
    if entry.is_complete():
        logger.trace("%s found in cache at %s", uri, entry.git_dir)
        return entry.git_dir

    entry.git_dir.parent.mkdir(parents=True, exist_ok=True)
    lock = LeaseLock(entry.lock_file_path)
    if lock.try_acquire():
        return _clone_as_owner(config, entry, lock, uri, runner or SubprocessGitRunner())

    return _wait_for_owner(config, entry, lock, uri)


# region owner


def _clone_as_owner(
    config: GitCacheConfig,
    entry: CacheEntry,
    lock: LeaseLock,
    uri: str,
    runner: GitRunner,
) -> Path:
    logger.debug("acquired lease %s", lock.file)
    try:
        with Heartbeat(lock, config.heartbeat_interval):
            # check again now that we hold the lease.
            # a previous owner could have finished between our fast path check and now
            if entry.is_complete():
                logger.debug("%s was added to cache while acquiring the lease", uri)
                return entry.git_dir

            _attempt_clone(entry, uri, config.clone_mode, runner)
    except BaseException:
        _clean_up_failed_clone(entry)
        raise
    finally:
        lock.release()

    logger.info("added %s to cache at %s", uri, entry.git_dir)
    return entry.git_dir


def _attempt_clone(entry: CacheEntry, uri: str, clone_mode: CloneMode, runner: GitRunner) -> None:
    # leftovers of an owner that died mid clone
    remove_entry_from_disk(entry)

    if entry.git_dir.exists():
        raise GitCacheError.clone_failed(
            uri, reason=f"{entry.git_dir} exists and holds other cached repos"
        )

    logger.info("cloning %s", uri)
    result = runner.run(["clone", f"--{clone_mode}", uri, str(entry.staging_dir)])
    if result.exit_code != 0:
        raise GitCacheError.clone_failed(uri, result)

    if not is_complete_git_dir(entry.staging_dir):
        raise GitCacheError.clone_failed(uri, result, "git did not produce a repository")

    # waiters treat the git dir as done the moment it shows up, so it has to appear whole
    entry.staging_dir.rename(entry.git_dir)


def _clean_up_failed_clone(entry: CacheEntry) -> None:
    logger.debug("clone failed, cleaning up")
    try:
        remove_entry_from_disk(entry)
    except OSError as ex:
        logger.warning("failed to clean up: %s", ex)


# endregion owner

# region waiter


def _wait_for_owner(
    config: GitCacheConfig,
    entry: CacheEntry,
    lock: LeaseLock,
    uri: str,
) -> Path:
    logger.info("waiting for another process to finish cloning %s", uri)
    while True:
        if entry.is_complete():
            logger.debug("%s added to cache by another process", uri)
            return entry.git_dir

        age = lock.age()
        if age is None and not lock.exists():
            # the owner may have finished right after our first check
            if entry.is_complete():
                logger.debug("%s added to cache by another process", uri)
                return entry.git_dir
            raise GitCacheError.clone_failed(
                uri, reason="the process cloning it released its lease without a repository"
            )

        if age is not None and age >= config.lock_expiry:
            logger.warning("lease %s expired %.1fs after its last heartbeat", lock.file, age)
            raise GitCacheError.lock_expired(uri, lock.file, age)

        logger.trace("lease %s held, last heartbeat %ss ago", lock.file, age)
        time.sleep(config.poll_interval)


# endregion waiter
