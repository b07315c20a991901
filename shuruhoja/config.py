"""Configuration defaults and the INI-like configuration file reader."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

_GIB = 1024 * 1024 * 1024
_MIB = 1024 * 1024
_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class GeneralConfig:
    max_workers: int = 100
    skip_paths: list[str] = field(
        default_factory=lambda: ["/proc", "/sys", "/dev", "/run"]
    )
    max_depth: int = 0  # unlimited


@dataclass
class DetectionConfig:
    log_file_age_days: int = 30
    orphan_dir_age_days: int = 90
    orphan_dir_min_size: int = 1 * _GIB
    cache_min_size: int = 100 * _MIB
    duplicate_min_size: int = 10 * _MIB
    node_modules_max_size: int = 500 * _MIB
    python_venv_max_size: int = 1 * _GIB
    docker_cache_max_size: int = 5 * _GIB
    journal_log_max_size: int = 2 * _GIB


@dataclass
class RiskConfig:
    critical_size_gb: int = 10
    caution_size_gb: int = 1
    critical_age_days: int = 365
    caution_age_days: int = 180


@dataclass
class OutputConfig:
    format: str = "table"
    color: bool = True
    max_results: int = 50
    truncate_path_length: int = 80


@dataclass
class SafetyConfig:
    read_only: bool = True
    max_file_size: int = 10 * _GIB
    skip_system_dirs: bool = True
    max_memory_mb: int = 1024
    max_open_files: int = 10000


@dataclass
class Config:
    general: GeneralConfig = field(default_factory=GeneralConfig)
    detection: DetectionConfig = field(default_factory=DetectionConfig)
    risk: RiskConfig = field(default_factory=RiskConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    safety: SafetyConfig = field(default_factory=SafetyConfig)


def default_config() -> Config:
    """Return a fresh configuration holding the built-in defaults."""
    return Config()


def _default_paths() -> list[Path]:
    try:
        home = Path.home()
    except RuntimeError:
        home = Path("")
    return [Path("/etc/shuruhoja.conf"), home / ".config" / "shuruhoja.conf"]


def load(paths: Iterable[str | Path] | None = None) -> Config:
    """Load the first readable configuration file, falling back to defaults."""
    cfg = default_config()
    candidates = _default_paths() if paths is None else list(paths)
    for path in candidates:
        try:
            load_from_file(path, cfg)
        except OSError:
            continue
        return cfg
    print("Using default configuration")
    return cfg


def load_from_file(path: str | Path, cfg: Config) -> None:
    """Apply the settings in ``path`` to ``cfg``; raises OSError if unreadable."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    section = ""
    for raw in text.split("\n"):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1]
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        parse_config_value(section, key.strip(), value.strip(), cfg)


def _atoi(value: str) -> int | None:
    if not _INT_RE.fullmatch(value):
        return None
    number = int(value)
    if not -(2**63) <= number < 2**63:
        return None
    return number


def parse_config_value(section: str, key: str, value: str, cfg: Config) -> None:
    """Apply one ``key = value`` setting from ``section``; unknown keys are ignored."""
    match section, key:
        case "general", "max_workers":
            if (number := _atoi(value)) is not None:
                cfg.general.max_workers = number
        case "general", "skip_paths":
            cfg.general.skip_paths = value.split(",")
        case "general", "max_depth":
            if (number := _atoi(value)) is not None:
                cfg.general.max_depth = number
        case "detection", "log_file_age_days":
            if (number := _atoi(value)) is not None:
                cfg.detection.log_file_age_days = number
        case "detection", "orphan_dir_age_days":
            if (number := _atoi(value)) is not None:
                cfg.detection.orphan_dir_age_days = number