"""Checks that keep the scan away from sensitive paths, and resource limits."""

from __future__ import annotations

import os

_SYSTEM_DIRS = (
    "/proc",
    "/sys",
    "/dev",
    "/run",
    "/boot",
    "/snap",
    "/var/lib/docker",
)

_DANGEROUS_PATTERNS = (
    "/etc/shadow",
    "/etc/passwd",
    "/etc/gshadow",
    "/root/",
    "/var/lib/",
    "/usr/lib/",
)


def is_safe_to_scan(path: str) -> bool:
    """Return True if ``path`` is readable and outside system and sensitive areas."""
    return (
        not is_system_directory(path)
        and has_read_permission(path)
        and not is_dangerous_path(path)
    )


def is_system_directory(path: str) -> bool:
    """Return True for a system directory or anything beneath one."""
    return any(path == d or path.startswith(d + "/") for d in _SYSTEM_DIRS)


def has_read_permission(path: str) -> bool:
    """Return True if ``path`` can be stat'ed and opened for reading."""
    try:
        os.stat(path)
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def is_dangerous_path(path: str) -> bool:
    """Return True if ``path`` contains a sensitive location."""
    return any(pattern in path for pattern in _DANGEROUS_PATTERNS)


def set_resource_limits(max_memory_mb: int, max_open_files: int) -> None:
    """Cap address space and open files for this process; non-positive values are skipped."""
    import resource

    if max_memory_mb > 0:
        limit = max_memory_mb * 1024 * 1024
        resource.setrlimit(resource.RLIMIT_AS, (limit, limit))
    if max_open_files > 0:
        resource.setrlimit(resource.RLIMIT_NOFILE, (max_open_files, max_open_files))