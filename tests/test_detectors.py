from datetime import datetime, timedelta, timezone

import pytest

from shuruhoja.detectors import Detector, LogFileDetector, format_size
from shuruhoja.types import FileInfo, FileType, Recommendation, RiskLevel

MIB = 1024 * 1024


def _info(path, size=10, days_old=0, is_dir=False):
    mod_time = datetime.now(timezone.utc) - timedelta(days=days_old, minutes=1)
    return FileInfo(path=path, size=size, is_dir=is_dir, mod_time=mod_time)


def test_detector_is_abstract():
    with pytest.raises(TypeError):
        Detector()


def test_directory_is_ignored():
    detector = LogFileDetector(30)
    assert detector.detect(_info("/var/log/app.log", is_dir=True, days_old=100)) is None


def test_non_log_file_is_ignored():
    detector = LogFileDetector(30)
    assert detector.detect(_info("/home/user/readme.txt", days_old=100)) is None


def test_recent_log_is_safe():
    result = LogFileDetector(30).detect(_info("/srv/app/server.log", days_old=2))
    assert result.type is FileType.LOG
    assert result.risk_level is RiskLevel.SAFE
    assert result.recommendation is Recommendation.KEEP
    assert result.reason == ""


def test_old_small_log_needs_review():
    result = LogFileDetector(30).detect(_info("/srv/app/server.log", size=5 * MIB, days_old=40))
    assert result.risk_level is RiskLevel.CAUTION
    assert result.recommendation is Recommendation.REVIEW
    assert result.age_days == 40
    assert result.reason.startswith("Old log file (40 days, ")
    assert result.reason.endswith(f"{format_size(5 * MIB)})")


def test_old_large_log_is_critical():
    result = LogFileDetector(30).detect(_info("/srv/app/server.log", size=200 * MIB, days_old=40))
    assert result.risk_level is RiskLevel.CRITICAL
    assert result.recommendation is Recommendation.DELETE


def test_exactly_hundred_mib_is_not_critical():
    result = LogFileDetector(30).detect(_info("/srv/app/server.log", size=100 * MIB, days_old=40))
    assert result.risk_level is RiskLevel.CAUTION


def test_age_equal_to_limit_is_safe():
    result = LogFileDetector(30).detect(_info("/srv/app/server.log", days_old=30))
    assert result.age_days == 30
    assert result.risk_level is RiskLevel.SAFE


def test_var_log_directory_marks_any_file():
    result = LogFileDetector(30).detect(_info("/var/log/syslog", days_old=60))
    assert result.type is FileType.LOG
    assert result.risk_level is RiskLevel.CAUTION


def test_name_match_is_case_insensitive():
    result = LogFileDetector(30).detect(_info("/data/ARCHIVE.LOG", days_old=1))
    assert result.type is FileType.LOG


@pytest.mark.parametrize("name", ["x.log.1", "system.journal", "dump.gz", "old.bz2"])
def test_other_patterns_match(name):
    result = LogFileDetector(0).detect(_info(f"/data/{name}", days_old=3))
    assert result.recommendation is Recommendation.REVIEW


def test_format_size_small_values_are_bytes():
    assert format_size(0) == "0 B"
    assert format_size(1023) == "1023 B"


def test_format_size_fixed_values():
    assert format_size(1024) == "1.0 KB"
    assert format_size(1536) == "1.5 KB"
    assert format_size(1024**3) == "1.0 GB"


@pytest.mark.parametrize("exp", range(6))
def test_format_size_unit_letters(exp):
    text = format_size(1024 ** (exp + 1))
    assert text.endswith(" " + "KMGTPE"[exp] + "B")