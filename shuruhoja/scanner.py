"""Concurrent, read-only filesystem walking."""

from __future__ import annotations

import os
import queue
import stat
import threading
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone

from shuruhoja.types import FileInfo

_SCANNER_SKIP = ("/proc", "/sys", "/dev", "/run", ".snapshot", ".zfs")
_SYSTEM_PATHS = ("/proc", "/sys", "/dev", "/run", "/var/lib/docker", "/snap")
_POLL_SECONDS = 0.05


class ScanPermissionError(PermissionError):
    """A directory could not be listed for lack of permission."""

    def __init__(self, path: str, err: BaseException) -> None:
        super().__init__(f"permission denied: {path}: {err}")
        self.path = path
        self.err = err

    def __str__(self) -> str:
        return f"permission denied: {self.path}: {self.err}"


@dataclass(frozen=True)
class ScanStats:
    files_scanned: int = 0
    dirs_scanned: int = 0
    total_size: int = 0
    errors: int = 0


def is_symlink(mode: int) -> bool:
    """Return True if the stat mode describes a symbolic link."""
    return stat.S_ISLNK(mode)


def should_skip_system_path(path: str) -> bool:
    """Return True if ``path`` is exactly one of the system paths."""
    return path in _SYSTEM_PATHS


def create_file_info(path: str, stat_result: os.stat_result) -> FileInfo:
    """Build a FileInfo from an lstat/stat result."""
    mod_time = datetime.fromtimestamp(stat_result.st_mtime, tz=timezone.utc)
    return FileInfo(
        path=path,
        size=stat_result.st_size,
        is_dir=stat.S_ISDIR(stat_result.st_mode),
        mode=stat_result.st_mode,
        mod_time=mod_time,
        access_time=mod_time,
        uid=getattr(stat_result, "st_uid", 0),
        gid=getattr(stat_result, "st_gid", 0),
        inode=stat_result.st_ino,
    )


def is_accessible(path: str) -> bool:
    """Return True if ``path`` can be stat'ed."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


class Walker:
    """Decides whether a path lies under one of a set of skipped directories."""

    def __init__(self, skip_dirs: Iterable[str]) -> None:
        self.skip_dirs = set(skip_dirs)

    def should_skip(self, path: str) -> bool:
        if path in self.skip_dirs:
            return True
        current = path
        while current not in ("/", ".", ""):
            if current in self.skip_dirs:
                return True
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent
        return False


class ConcurrentScanner:
    """Walks a directory tree with a pool of worker threads."""

    def __init__(self, max_workers: int = 100) -> None:
        self.max_workers = max_workers if max_workers > 0 else 100
        self._lock = threading.Lock()
        self._files = 0
        self._dirs = 0
        self._size = 0
        self._errors = 0

    def stats(self) -> ScanStats:
        with self._lock:
            return ScanStats(self._files, self._dirs, self._size, self._errors)

    def should_skip(self, path: str) -> bool:
        return path in _SCANNER_SKIP

    def scan(
        self, root: str, cancel_event: threading.Event | None = None
    ) -> Iterator[FileInfo | OSError]:
        """Yield a FileInfo for every entry below ``root``, and each error met.

        Errors are yielded in the same stream as ``OSError`` instances; a
        directory that cannot be listed for lack of permission yields a
        ``ScanPermissionError``. Setting ``cancel_event`` stops the walk.
        """
        stop = threading.Event()
        results: queue.Queue = queue.Queue()
        done = object()
        pending = 0
        pending_lock = threading.Lock()

        def cancelled() -> bool:
            return stop.is_set() or (cancel_event is not None and cancel_event.is_set())

        def finish() -> None:
            nonlocal pending
            with pending_lock:
                pending -= 1
                last = pending == 0
            if last:
                results.put(done)

        def run(path: str) -> None:
            try:
                self._walk_dir(path, submit, results.put, cancelled)
            finally:
                finish()

        executor = ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="scan"
        )

        def submit(path: str) -> None:
            nonlocal pending
            with pending_lock:
                pending += 1
            try:
                executor.submit(run, path)
            except RuntimeError:
                finish()

        try:
            submit(root)
            while True:
                if cancelled():
                    return
                try:
                    item = results.get(timeout=_POLL_SECONDS)
                except queue.Empty:
                    continue
                if item is done:
                    return
                yield item
        finally:
            stop.set()
            executor.shutdown(wait=False, cancel_futures=True)

    def _walk_dir(
        self,
        path: str,
        submit: Callable[[str], None],
        emit: Callable[[object], None],
        cancelled: Callable[[], bool],
    ) -> None:
        if cancelled():
            return
        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except PermissionError as exc:
            self._add(errors=1)
            emit(ScanPermissionError(path, exc))
            return
        except OSError:
            return

        for entry in entries:
            if cancelled():
                return
            full_path = os.path.join(path, entry.name)
            if self.should_skip(full_path):
                continue
            try:
                st = entry.stat(follow_symlinks=False)
            except OSError as exc:
                self._add(errors=1)
                emit(exc)
                continue
            info = create_file_info(full_path, st)
            if info.is_dir:
                self._add(dirs=1)
                submit(full_path)
            else:
                self._add(files=1, size=st.st_size)
            emit(info)

    def _add(self, files: int = 0, dirs: int = 0, size: int = 0, errors: int = 0) -> None:
        with self._lock:
            self._files += files
            self._dirs += dirs
            self._size += size
            self._errors += errors