from .git import get_git_config_value, run_git_command
from .uri import canonicalize_uri

__all__ = [
    "canonicalize_uri",
    "get_git_config_value",
    "run_git_command",
]
