"""Runs the scanner and classifies every entry it finds."""

from __future__ import annotations

import sys
import threading
from concurrent.futures import CancelledError

from shuruhoja.config import Config
from shuruhoja.detectors import Detector, LogFileDetector
from shuruhoja.types import FileInfo, FileType, Recommendation, RiskLevel, ScanResult


class Analyzer:
    """Classifies scanned entries with a chain of detectors."""

    def __init__(self, scanner, config: Config) -> None:
        self.scanner = scanner
        self.config = config
        self.detectors: list[Detector] = [
            LogFileDetector(config.detection.log_file_age_days),
        ]

    def analyze(
        self, root: str, cancel_event: threading.Event | None = None
    ) -> list[ScanResult]:
        """Scan ``root`` and return results, largest first.

        Scan errors are reported on stderr as warnings. Raises CancelledError
        if ``cancel_event`` is set.
        """

        def cancelled() -> bool:
            return cancel_event is not None and cancel_event.is_set()

        results: list[ScanResult] = []
        for item in self.scanner.scan(root, cancel_event):
            if cancelled():
                raise CancelledError("analysis cancelled")
            if isinstance(item, BaseException):
                print(f"Warning: {item}", file=sys.stderr)
                continue
            results.append(self.analyze_file(item))

        if cancelled():
            raise CancelledError("analysis cancelled")

        results.sort(key=lambda r: r.info.size, reverse=True)
        return results

    def analyze_file(self, info: FileInfo) -> ScanResult:
        """Return the first detector's verdict, or a plain safe result."""
        for detector in self.detectors:
            result = detector.detect(info)
            if result is not None:
                return result
        return ScanResult(
            info=info,
            type=FileType.DIRECTORY if info.is_dir else FileType.FILE,
            risk_level=RiskLevel.SAFE,
            recommendation=Recommendation.KEEP,
        )