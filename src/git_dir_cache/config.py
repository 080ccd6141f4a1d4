from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from git_dir_cache.constants import defaults, keys
from git_dir_cache.types import CLONE_MODES, CloneMode
from git_dir_cache.utils.git import get_git_config_value
from git_dir_cache.utils.logging import get_logger

if TYPE_CHECKING:
    from git_dir_cache.cli.arguments import CLIArgumentNamespace

logger = get_logger(__name__)


class GitCacheConfig:
    def __init__(
        self,
        root_dir: Optional[Path] = None,
        clone_mode: Optional[CloneMode] = None,
        heartbeat_interval: Optional[float] = None,
        lock_expiry: Optional[float] = None,
        poll_interval: Optional[float] = None,
    ) -> None:
        self._root_dir = Path(root_dir) if root_dir is not None else Path(get_root_dir())
        self._clone_mode = clone_mode if clone_mode is not None else get_clone_mode()
        self._heartbeat_interval = (
            heartbeat_interval if heartbeat_interval is not None else get_heartbeat_interval()
        )
        self._lock_expiry = lock_expiry if lock_expiry is not None else get_lock_expiry()
        self._poll_interval = poll_interval if poll_interval is not None else get_poll_interval()

        if self._heartbeat_interval >= self._lock_expiry:
            raise ValueError(  # noqa: TRY003
                f"heartbeat interval ({self._heartbeat_interval}s) must be smaller"
                f" than the lock expiry ({self._lock_expiry}s)"
            )

    @classmethod
    def from_cli_namespace(cls, args: "CLIArgumentNamespace") -> "GitCacheConfig":
        root_dir = Path(args.root_dir) if args.root_dir is not None else None
        return cls(root_dir=root_dir)

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    @property
    def clone_mode(self) -> CloneMode:
        return self._clone_mode

    @property
    def heartbeat_interval(self) -> float:
        return self._heartbeat_interval

    @property
    def lock_expiry(self) -> float:
        return self._lock_expiry

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    def __eq__(self, value: Any) -> bool:  # noqa: ANN401
        if not isinstance(value, type(self)):
            return NotImplemented
        return vars(self) == vars(value)

    def __repr__(self) -> str:
        type_name = type(self).__name__
        arg_strings = [f"{name.lstrip('_')}={value!r}" for name, value in vars(self).items()]
        return f"{type_name}({', '.join(arg_strings)})"


def get_root_dir() -> str:
    val = get_git_config_value(keys.GIT_CONFIG_ROOT_DIR)
    if val and val.strip():
        return str(Path(val.strip()).expanduser())
    return defaults.ROOT_DIR


def get_clone_mode() -> CloneMode:
    """Determines the clone mode to use from Git configuration.

    Returns:
        The configured clone mode, or the default if unset or invalid.
    """
    key = keys.GIT_CONFIG_CLONE_MODE
    clone_mode = get_git_config_value(key)
    if clone_mode:
        clone_mode = clone_mode.lower().strip()
        if clone_mode in CLONE_MODES:
            return clone_mode  # type: ignore

        logger.warning("%s %s not one of %s", key, clone_mode, CLONE_MODES)

    return defaults.CLONE_MODE  # type: ignore


def get_heartbeat_interval() -> float:
    return _get_positive_seconds(keys.GIT_CONFIG_HEARTBEAT_INTERVAL, defaults.HEARTBEAT_INTERVAL)


def get_lock_expiry() -> float:
    return _get_positive_seconds(keys.GIT_CONFIG_LOCK_EXPIRY, defaults.LOCK_EXPIRY)


def get_poll_interval() -> float:
    return _get_positive_seconds(keys.GIT_CONFIG_POLL_INTERVAL, defaults.POLL_INTERVAL)


def _get_positive_seconds(key: str, default: float) -> float:
    val = get_git_config_value(key)
    if not val:
        return default
    try:
        seconds = float(val.strip())
    except ValueError as ex:
        logger.warning("%s: %s", key, ex)
        return default

    if seconds <= 0:
        logger.warning("%s must be greater than 0, got %s", key, val)
        return default
    return seconds
