"""Remote URL to cache key canonicalization"""

from typing import List

from git_dir_cache.constants.filenames import LOCK_SUFFIX, PARTIAL_SUFFIX

REL_SEGMENT = "REL"
DOT_TOKEN = "_DOT_"
DOTDOT_TOKEN = "_DOTDOT_"
TILDE_TOKEN = "_TILDE_"

FILE_TRANSPORT = "file"
SCP_TRANSPORT = "ssh"


def canonicalize_uri(uri: str) -> str:
    """Maps a git remote URL to a stable, relative, filesystem-safe cache key.

    The key has the form `<transport>/<host or REL>/<path segments>`. User info,
    ports, trailing slashes and a trailing `.git` are dropped so that
    syntactic variations of the same remote share one key. `.`, `..` and `~`
    segments are replaced by escape tokens, so the key never walks out of the
    directory it is joined onto. Segments ending in `.lock` or `.partial` have
    that dot escaped as well, so no key lands on the lock file or staging dir
    of another key.

    Args:
        uri: The git remote URL, in any dialect git accepts.

    Returns:
        The canonical key, using "/" as the separator.

    Raises:
        ValueError: If the uri is empty, or has no path after the host.

    Examples:
        ssh://git@gitlab.com:3333/org/repo.git → ssh/gitlab.com/org/repo
        git@github.com:org/repo.git → ssh/github.com/org/repo
        ../foo.git → file/REL/_DOTDOT_/foo
        ~user/foo.git → file/REL/_TILDE_user/foo
        /Users/me/code/repo.git → file/Users/me/code/repo
        https://host/org/repo.lock → https/host/org/repo_DOT_lock
    """
    uri = uri.strip()
    if not uri:
        raise ValueError("uri cannot be empty")  # noqa: TRY003

    if "://" in uri:
        scheme, _, rest = uri.partition("://")
        scheme = scheme.lower()
        if scheme == FILE_TRANSPORT:
            return _file_key(rest)
        authority, _, path = rest.partition("/")
        return _join_key(scheme, _strip_user_and_port(authority), path)

    colon = uri.find(":")
    slash = uri.find("/")
    if colon > 0 and (slash == -1 or colon < slash):
        # scp-like syntax, [user@]host:path. unknown aliases are treated the same way
        user_host, _, path = uri.partition(":")
        return _join_key(SCP_TRANSPORT, _strip_user_and_port(user_host), path)

    return _file_key(uri)


def _strip_user_and_port(authority: str) -> str:
    host = authority.rpartition("@")[2]
    if host.startswith("["):
        # bracketed ipv6 literal, the port comes after the closing bracket
        host = host[: host.find("]") + 1] if "]" in host else host
    else:
        host = host.partition(":")[0]
    return host.lower()


def _file_key(path: str) -> str:
    if path.startswith("/"):
        return _join_key(FILE_TRANSPORT, "", path)
    return _join_key(FILE_TRANSPORT, REL_SEGMENT, path)


def _join_key(transport: str, host: str, path: str) -> str:
    segments = _split_path(path)
    if not segments:
        # the key would be a parent dir of every other key on this host
        raise ValueError("uri has no repository path")  # noqa: TRY003

    parts = [transport]
    if host:
        parts.append(_escape_segment(host))
    parts += [_escape_segment(segment) for segment in segments]
    return "/".join(parts)


def _split_path(path: str) -> List[str]:
    path = path.rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    return [segment for segment in path.split("/") if segment]


def _escape_segment(segment: str) -> str:
    if segment == ".":
        return DOT_TOKEN
    if segment == "..":
        return DOTDOT_TOKEN
    if segment.startswith("~"):
        segment = TILDE_TOKEN + segment[1:]
    for suffix in (LOCK_SUFFIX, PARTIAL_SUFFIX):
        if segment.endswith(suffix):
            return segment[: -len(suffix)] + DOT_TOKEN + suffix[1:]
    return segment
