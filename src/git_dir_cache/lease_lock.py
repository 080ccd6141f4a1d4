"""Filesystem lease lock

A lease is held by whoever manages to create the lock file. The holder keeps
the lease alive by rewriting the timestamp stored in the file. Anyone else can
read that timestamp to decide whether the holder is still alive. Only
exclusive file creation is relied on, so this works across processes.
"""

import os
import threading
import time
from pathlib import Path
from types import TracebackType
from typing import Optional, Type, Union

from git_dir_cache.utils.logging import get_logger

logger = get_logger(__name__)


class LeaseLock:
    """
    A lock file carrying a heartbeat timestamp.

    Example:
        lock = LeaseLock("/tmp/repo.lock")
        if lock.try_acquire():
            with Heartbeat(lock, interval=1.0):
                ...
            lock.release()
        else:
            print(lock.age())
    """

    def __init__(self, file: Union[str, "os.PathLike[str]"]) -> None:
        self.file = Path(file)
        self._acquired = False

    def try_acquire(self) -> bool:
        """
        Atomically create the lock file, stamped with the current time.

        Returns:
            True if we created it and now own the lease, False if it already exists.
        """
        try:
            # O_EXCL makes the create fail if anyone else got there first
            fd = os.open(self.file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o644)
        except FileExistsError:
            logger.trace("lock file %s already exists", self.file)
            return False

        try:
            os.write(fd, _timestamp())
        finally:
            os.close(fd)

        self._acquired = True
        logger.trace("created lock file %s", self.file)
        return True

    def heartbeat(self) -> None:
        """
        Overwrite the lock file with the current time.

        Raises:
            FileNotFoundError: if the lock file no longer exists. It is never recreated here.
        """
        fd = os.open(self.file, os.O_WRONLY | os.O_TRUNC)
        try:
            os.write(fd, _timestamp())
        finally:
            os.close(fd)
        logger.trace("heartbeat written to %s", self.file)

    def age(self) -> Optional[float]:
        """
        Seconds since the timestamp in the lock file was written.

        Returns:
            The age, or None if the file is missing or unreadable. A file that does
            not hold a timestamp is aged by its modification time.
        """
        try:
            content = self.file.read_text()
        except OSError:
            return None
        try:
            written_at = float(content.strip())
        except ValueError:
            # created but not stamped yet, or the stamp is garbage. fall back to mtime
            try:
                written_at = self.file.stat().st_mtime
            except OSError:
                return None
        return max(0.0, time.time() - written_at)

    def exists(self) -> bool:
        return self.file.exists()

    def release(self) -> None:
        """
        Delete the lock file.

        This method has no effect if the file is already gone.
        """
        try:
            self.file.unlink()
            logger.trace("lock file %s removed", self.file)
        except FileNotFoundError:
            logger.debug("lock file %s does not exist on lock release", self.file)
        self._acquired = False

    def is_acquired(self) -> bool:
        return self._acquired


class Heartbeat:
    """
    Background thread that calls `LeaseLock.heartbeat()` every `interval` seconds.

    Use as a context manager: the thread is started on entry and stopped (and
    joined) on exit, so no heartbeat can land after the block is left.
    """

    def __init__(self, lock: LeaseLock, interval: float) -> None:
        self.lock = lock
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def __enter__(self) -> "Heartbeat":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.stop()

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name=f"heartbeat:{self.lock.file.name}", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            try:
                self.lock.heartbeat()
            except FileNotFoundError:
                logger.warning("lock file %s disappeared, stopping heartbeat", self.lock.file)
                return
            except OSError as ex:
                logger.warning("failed to write heartbeat to %s: %s", self.lock.file, ex)


def _timestamp() -> bytes:
    return f"{time.time():.6f}\n".encode()
