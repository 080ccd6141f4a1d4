import shutil
from pathlib import Path

from git_dir_cache.constants import filenames
from git_dir_cache.utils.logging import get_logger
from git_dir_cache.utils.uri import canonicalize_uri

logger = get_logger(__name__)


class CacheEntry:
    """The on-disk paths that belong to one cached repo.

    <root>/_repos/<key>          bare git dir, only ever present once complete
    <root>/_repos/<key>.lock     lease lock of the process currently cloning
    <root>/_repos/<key>.partial  clone destination until it is moved onto the git dir
    """

    def __init__(self, git_dir: Path) -> None:
        self._git_dir = git_dir
        self._lock_file_path = git_dir.with_name(git_dir.name + filenames.LOCK_SUFFIX)
        self._staging_dir = git_dir.with_name(git_dir.name + filenames.PARTIAL_SUFFIX)

    @classmethod
    def from_uri(cls, root_dir: Path, uri: str) -> "CacheEntry":
        return cls(get_git_dir(root_dir, uri))

    @property
    def git_dir(self) -> Path:
        return self._git_dir

    @property
    def lock_file_path(self) -> Path:
        return self._lock_file_path

    @property
    def staging_dir(self) -> Path:
        return self._staging_dir

    def is_complete(self) -> bool:
        return is_complete_git_dir(self._git_dir)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._git_dir)!r})"


def get_git_dir(root_dir: Path, uri: str) -> Path:
    """Returns the git dir for a given uri.

    Args:
        root_dir: cache root dir
        uri: The URI of the repo.

    Returns:
        absolute path to the cached bare repo.
    """
    return root_dir.absolute() / filenames.REPOS_DIR / canonicalize_uri(uri)


def get_lock_file_path(root_dir: Path, uri: str) -> Path:
    return CacheEntry.from_uri(root_dir, uri).lock_file_path


def is_complete_git_dir(git_dir: Path) -> bool:
    return (git_dir / filenames.REPO_MARKER).is_file()


def remove_entry_from_disk(entry: CacheEntry) -> None:
    """Removes the staging dir of an entry.

    The git dir only ever appears through the rename of a finished staging dir,
    so it is never removed here. A git dir path that exists without being
    complete holds the repos of nested keys.

    Must only be called while holding the entry's lease.

    Raises:
        OSError
    """
    logger.debug("removing %s", entry.staging_dir)
    try:
        shutil.rmtree(entry.staging_dir)
    except FileNotFoundError:
        pass
