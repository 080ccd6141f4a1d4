import enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from git_dir_cache.git_runner import GitResult


class GitCacheErrorType(enum.Enum):
    INVALID_ARGUMENT = enum.auto()
    CLONE_FAILED = enum.auto()
    LOCK_EXPIRED = enum.auto()


class GitCacheError(Exception):
    def __init__(self, error_type: GitCacheErrorType, msg: str) -> None:
        super().__init__(msg)
        self.type = error_type
        self.msg = msg

    @classmethod
    def invalid_argument(cls, reason: str) -> "GitCacheError":
        return cls(GitCacheErrorType.INVALID_ARGUMENT, f"invalid argument: {reason}")

    @staticmethod
    def clone_failed(
        uri: str, result: Optional["GitResult"] = None, reason: Optional[str] = None
    ) -> "CloneFailedError":
        return CloneFailedError(uri, result, reason)

    @staticmethod
    def lock_expired(uri: str, lock_file: Path, age: float) -> "LockExpiredError":
        return LockExpiredError(uri, lock_file, age)

    def __str__(self) -> str:
        return self.msg


class CloneFailedError(GitCacheError):
    """The clone of a repo into the cache did not produce a complete git dir"""

    def __init__(
        self, uri: str, result: Optional["GitResult"] = None, reason: Optional[str] = None
    ) -> None:
        msg = f"failed to clone {uri} into cache"
        if reason:
            msg += f": {reason}"
        elif result is not None:
            msg += f": git exited with {result.exit_code}"
            detail = result.stderr.strip()
            if detail:
                msg += f"\n{detail}"
        super().__init__(GitCacheErrorType.CLONE_FAILED, msg)
        self.uri = uri
        self.result = result


class LockExpiredError(GitCacheError):
    """The owner of a clone lease stopped sending heartbeats"""

    def __init__(self, uri: str, lock_file: Path, age: float) -> None:
        super().__init__(
            GitCacheErrorType.LOCK_EXPIRED,
            f"lock for {uri} has not been refreshed in {age:.1f}s,"
            f" its owner is presumed dead. remove {lock_file} to retry",
        )
        self.uri = uri
        self.lock_file = lock_file
        self.age = age
