import os
import threading

import pytest

from shuruhoja.scanner import (
    ConcurrentScanner,
    ScanPermissionError,
    ScanStats,
    Walker,
    create_file_info,
    is_accessible,
    is_symlink,
    should_skip_system_path,
)
from shuruhoja.types import FileInfo


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"hello")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.log").write_bytes(b"abc")
    (sub / "deeper").mkdir()
    return tmp_path


def _infos(items):
    return [i for i in items if isinstance(i, FileInfo)]


def test_scan_finds_every_entry(tree):
    scanner = ConcurrentScanner(4)
    infos = _infos(scanner.scan(str(tree)))
    paths = {i.path for i in infos}
    assert paths == {
        os.path.join(str(tree), "a.txt"),
        os.path.join(str(tree), "sub"),
        os.path.join(str(tree), "sub", "b.log"),
        os.path.join(str(tree), "sub", "deeper"),
    }
    by_path = {i.path: i for i in infos}
    assert by_path[os.path.join(str(tree), "sub")].is_dir is True
    assert by_path[os.path.join(str(tree), "a.txt")].size == len(b"hello")


def test_scan_updates_stats(tree):
    scanner = ConcurrentScanner(2)
    list(scanner.scan(str(tree)))
    assert scanner.stats() == ScanStats(
        files_scanned=2,
        dirs_scanned=2,
        total_size=len(b"hello") + len(b"abc"),
        errors=0,
    )


def test_scan_does_not_follow_symlinks(tree):
    link = tree / "link"
    os.symlink(tree / "sub", link)
    infos = _infos(ConcurrentScanner(2).scan(str(tree)))
    link_info = [i for i in infos if i.path == str(link)]
    assert len(link_info) == 1
    assert link_info[0].is_dir is False
    assert is_symlink(link_info[0].mode) is True
    assert not any(i.path.startswith(str(link) + os.sep) for i in infos)


def test_scan_cancelled_before_start_yields_nothing(tree):
    event = threading.Event()
    event.set()
    assert list(ConcurrentScanner(2).scan(str(tree), event)) == []


def test_scan_missing_root_yields_nothing(tmp_path):
    scanner = ConcurrentScanner(2)
    assert list(scanner.scan(str(tmp_path / "missing"))) == []
    assert scanner.stats().errors == 0


def test_scan_stops_when_consumer_cancels(tree):
    event = threading.Event()
    gen = ConcurrentScanner(2).scan(str(tree), event)
    first = next(gen)
    event.set()
    assert isinstance(first, FileInfo)
    assert list(gen) == []


def test_non_positive_workers_default():
    assert ConcurrentScanner(0).max_workers == 100
    assert ConcurrentScanner(-3).max_workers == 100
    assert ConcurrentScanner(7).max_workers == 7


def test_scanner_should_skip_exact_matches():
    scanner = ConcurrentScanner(1)
    assert scanner.should_skip("/proc") is True
    assert scanner.should_skip(".zfs") is True
    assert scanner.should_skip("/proc/1") is False
    assert scanner.should_skip("/home/.zfs") is False


def test_should_skip_system_path():
    assert should_skip_system_path("/var/lib/docker") is True
    assert should_skip_system_path("/snap") is True
    assert should_skip_system_path("/snap/core") is False


def test_permission_error_message():
    err = ScanPermissionError("/x", OSError("boom"))
    assert str(err) == "permission denied: /x: boom"
    assert err.path == "/x"
    assert isinstance(err, PermissionError)


def test_walker_skips_descendants():
    walker = Walker(["/var/cache"])
    assert walker.should_skip("/var/cache") is True
    assert walker.should_skip("/var/cache/apt/archives") is True
    assert walker.should_skip("/var/cachex") is False
    assert walker.should_skip("/var") is False


def test_walker_root_and_relative_paths():
    assert Walker(["/"]).should_skip("/") is True
    assert Walker(["/"]).should_skip("/home") is False
    relative = Walker(["a"])
    assert relative.should_skip("a/b/c") is True
    assert relative.should_skip("c") is False


def test_is_accessible(tmp_path):
    assert is_accessible(str(tmp_path)) is True
    assert is_accessible(str(tmp_path / "missing")) is False


def test_create_file_info_from_stat(tmp_path):
    target = tmp_path / "f.bin"
    target.write_bytes(b"12345678")
    st = os.stat(target)
    info = create_file_info(str(target), st)
    assert info.path == str(target)
    assert info.size == st.st_size
    assert info.is_dir is False
    assert info.inode == st.st_ino
    assert info.mod_time.timestamp() == pytest.approx(st.st_mtime)
    assert info.access_time == info.mod_time
    assert is_symlink(info.mode) is False