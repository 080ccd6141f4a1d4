import subprocess
import threading
import time
from pathlib import Path
from typing import List, Optional

from git_dir_cache.constants import filenames
from git_dir_cache.git_runner import GitResult


def create_empty_git_repo(parent_dir: Path) -> Path:
    repo_dir = parent_dir / "temp"
    subprocess.check_call(["git", "init", str(repo_dir)])
    return repo_dir


def commit_to_repo(repo_dir: Path, msg: str) -> None:
    subprocess.check_call(
        [
            "git",
            "-C",
            str(repo_dir),
            "-c",
            "user.name=test",
            "-c",
            "user.email=test@example.com",
            "commit",
            "--allow-empty",
            "-m",
            msg,
        ]
    )


class FakeGitRunner:
    """Stands in for git. A successful 'clone' writes the repo marker into its target dir."""

    def __init__(
        self,
        exit_code: int = 0,
        delay: float = 0.0,
        populate: bool = True,
        stderr: str = "",
        raises: Optional[BaseException] = None,
    ) -> None:
        self.exit_code = exit_code
        self.delay = delay
        self.populate = populate
        self.stderr = stderr
        self.raises = raises
        self.calls: List[List[str]] = []
        self._lock = threading.Lock()

    def run(self, args: List[str]) -> GitResult:
        with self._lock:
            self.calls.append(list(args))

        target = Path(args[-1])
        # what git leaves behind part way through a clone
        (target / "objects").mkdir(parents=True, exist_ok=True)
        if self.delay:
            time.sleep(self.delay)

        if self.raises is not None:
            raise self.raises

        if self.exit_code == 0 and self.populate:
            (target / filenames.REPO_MARKER).write_text("[core]\n\tbare = true\n")

        return GitResult(self.exit_code, "", self.stderr)
