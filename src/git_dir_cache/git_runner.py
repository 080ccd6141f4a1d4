"""Runs the git executable on behalf of the clone coordinator"""

from typing import List, NamedTuple

from git_dir_cache.utils.git import run_git_command
from git_dir_cache.utils.logging import get_logger

logger = get_logger(__name__)


class GitResult(NamedTuple):
    exit_code: int
    stdout: str
    stderr: str


class SubprocessGitRunner:
    """Runs `git <args>` in a subprocess and captures its output"""

    def run(self, args: List[str]) -> GitResult:
        res = run_git_command(command_args=args, capture_output=True)
        result = GitResult(
            res.returncode,
            res.stdout.decode(errors="replace") if res.stdout else "",
            res.stderr.decode(errors="replace") if res.stderr else "",
        )
        logger.trace("git exited with %s", result.exit_code)
        return result
