from pathlib import Path

from git_dir_cache.constants import filenames
from git_dir_cache.entry import (
    CacheEntry,
    get_git_dir,
    get_lock_file_path,
    remove_entry_from_disk,
)
from tests.fixtures import patch_get_git_config  # noqa: F401


def test_paths(tmp_path):
    uri = "https://github.com/org/repo.git"
    git_dir = get_git_dir(tmp_path, uri)
    assert git_dir == tmp_path / "_repos" / "https" / "github.com" / "org" / "repo"
    assert get_lock_file_path(tmp_path, uri) == git_dir.parent / "repo.lock"
    assert CacheEntry.from_uri(tmp_path, uri).staging_dir == git_dir.parent / "repo.partial"


def test_relative_root_dir_gives_absolute_git_dir():
    assert get_git_dir(Path("cache"), "../foo.git").is_absolute()


def test_relative_uri_stays_under_root(tmp_path):
    git_dir = get_git_dir(tmp_path, "../../foo.git")
    assert tmp_path.resolve() in git_dir.resolve().parents


def test_is_complete(tmp_path):
    entry = CacheEntry(tmp_path / "repo")
    assert not entry.is_complete()
    entry.git_dir.mkdir()
    assert not entry.is_complete()
    (entry.git_dir / filenames.REPO_MARKER).touch()
    assert entry.is_complete()


def test_remove_entry_keeps_complete_git_dir(tmp_path):
    entry = CacheEntry(tmp_path / "repo")
    entry.staging_dir.mkdir()
    entry.git_dir.mkdir()
    (entry.git_dir / filenames.REPO_MARKER).touch()
    entry.lock_file_path.touch()

    remove_entry_from_disk(entry)

    assert not entry.staging_dir.exists()
    assert entry.is_complete()
    assert entry.lock_file_path.exists()


def test_remove_entry_keeps_incomplete_git_dir(tmp_path):
    # an incomplete git dir is the parent of other cached repos
    parent = CacheEntry(tmp_path / "org")
    child = CacheEntry(parent.git_dir / "repo")
    child.git_dir.mkdir(parents=True)
    (child.git_dir / filenames.REPO_MARKER).touch()
    parent.staging_dir.mkdir()

    remove_entry_from_disk(parent)

    assert not parent.staging_dir.exists()
    assert child.is_complete()


def test_remove_entry_nothing_to_remove(tmp_path):
    remove_entry_from_disk(CacheEntry(tmp_path / "repo"))


def test_reserved_suffix_uris_do_not_collide(tmp_path):
    entry = CacheEntry.from_uri(tmp_path, "https://example.com/org/repo")
    lock_named = CacheEntry.from_uri(tmp_path, "https://example.com/org/repo.lock")
    partial_named = CacheEntry.from_uri(tmp_path, "https://example.com/org/repo.partial")

    reserved = {entry.git_dir, entry.lock_file_path, entry.staging_dir}
    assert lock_named.git_dir not in reserved
    assert partial_named.git_dir not in reserved
    assert lock_named.lock_file_path != entry.lock_file_path
