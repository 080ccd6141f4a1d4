from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import List, Protocol

    from git_dir_cache.git_runner import GitResult

    class GitRunner(Protocol):
        def run(self, args: List[str]) -> GitResult: ...

else:
    GitRunner = object
