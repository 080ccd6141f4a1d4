"""Shared on-disk cache of bare git clones"""

from .config import GitCacheConfig
from .core import ensure_git_dir
from .entry import CacheEntry, get_git_dir, get_lock_file_path
from .errors import CloneFailedError, GitCacheError, GitCacheErrorType, LockExpiredError
from .git_runner import GitResult, SubprocessGitRunner
from .lease_lock import Heartbeat, LeaseLock
from .utils.uri import canonicalize_uri

__all__ = [
    "CacheEntry",
    "CloneFailedError",
    "GitCacheConfig",
    "GitCacheError",
    "GitCacheErrorType",
    "GitResult",
    "Heartbeat",
    "LeaseLock",
    "LockExpiredError",
    "SubprocessGitRunner",
    "canonicalize_uri",
    "ensure_git_dir",
    "get_git_dir",
    "get_lock_file_path",
]
