"""Detectors that classify scanned entries."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from datetime import datetime

from shuruhoja.types import FileInfo, FileType, Recommendation, RiskLevel, ScanResult

_LARGE_LOG_BYTES = 100 * 1024 * 1024
_LOG_DIRS = ("/var/log/", "/var/logs/")


class Detector(ABC):
    """Inspects one entry and classifies it, or declines with None."""

    @abstractmethod
    def detect(self, info: FileInfo) -> ScanResult | None:
        """Return a classification for ``info``, or None if it does not apply."""


def format_size(size: int) -> str:
    """Format a byte count with binary units and one decimal place."""
    unit = 1024
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'KMGTPE'[exp]}B"


def _age_days(mod_time: datetime) -> int:
    now = datetime.now(mod_time.tzinfo) if mod_time.tzinfo else datetime.now()
    return int((now - mod_time).total_seconds() / 86400)


class LogFileDetector(Detector):
    """Flags log files older than a given number of days."""

    def __init__(self, max_age_days: int) -> None:
        self.max_age_days = max_age_days
        self.patterns = [".log", ".log.", ".journal", ".gz", ".bz2"]

    def _is_log_file(self, path: str) -> bool:
        if any(d in path for d in _LOG_DIRS):
            return True
        name = (os.path.basename(path.rstrip("/")) or path).lower()
        return any(pattern in name for pattern in self.patterns)

    def detect(self, info: FileInfo) -> ScanResult | None:
        if info.is_dir or not self._is_log_file(info.path):
            return None

        age = _age_days(info.mod_time)
        result = ScanResult(info=info, type=FileType.LOG, age_days=age)

        if age > self.max_age_days:
            if info.size > _LARGE_LOG_BYTES:
                result.risk_level = RiskLevel.CRITICAL
                result.recommendation = Recommendation.DELETE
            else:
                result.risk_level = RiskLevel.CAUTION
                result.recommendation = Recommendation.REVIEW
            result.reason = f"Old log file ({age} days, {format_size(info.size)})"
        else:
            result.risk_level = RiskLevel.SAFE
            result.recommendation = Recommendation.KEEP

        return result