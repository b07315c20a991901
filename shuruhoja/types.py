"""Core records shared by the scanner, the detectors and the report."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


class FileType(str, Enum):
    """Classification given to a scanned entry."""

    FILE = "file"
    DIRECTORY = "directory"
    LOG = "log"
    CACHE = "cache"
    TEMP = "temp"
    BACKUP = "backup"
    DUPLICATE = "duplicate"
    ORPHAN = "orphan"

    def __str__(self) -> str:
        return self.value


class RiskLevel(str, Enum):
    """How much attention an entry deserves."""

    SAFE = "Safe"
    CAUTION = "Caution"
    CRITICAL = "Critical"

    def __str__(self) -> str:
        return self.value


class Recommendation(str, Enum):
    """What the user is advised to do with an entry."""

    KEEP = "Keep"
    REVIEW = "Review"
    DELETE = "Delete"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FileInfo:
    """Metadata about one filesystem entry."""

    path: str
    size: int = 0
    is_dir: bool = False
    mode: int = 0
    mod_time: datetime = _EPOCH
    access_time: datetime = _EPOCH
    uid: int = 0
    gid: int = 0
    hard_links: int = 0
    inode: int = 0


@dataclass
class ScanResult:
    """An entry together with its classification and advice."""

    info: FileInfo
    type: FileType = FileType.FILE
    risk_level: RiskLevel = RiskLevel.SAFE
    recommendation: Recommendation = Recommendation.KEEP
    reason: str = ""
    duplicate_group: str = ""
    age_days: int = 0


@dataclass
class Summary:
    """Totals over a set of scan results."""

    total_scanned_bytes: int = 0
    total_scanned_files: int = 0
    total_scanned_dirs: int = 0
    potential_cleanup: int = 0
    critical_risk_count: int = 0
    caution_risk_count: int = 0
    scan_duration: timedelta = field(default_factory=timedelta)