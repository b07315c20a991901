"""Terminal rendering of scan results."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from datetime import timedelta
from typing import TextIO

from tabulate import DataRow, Line, TableFormat, tabulate

from shuruhoja.types import Recommendation, RiskLevel, ScanResult, Summary

__all__ = [
    "show_welcome",
    "render_results",
    "calculate_summary",
    "show_top_findings",
    "show_recommendations",
    "format_size",
    "truncate_path",
    "get_risk_color",
    "get_recommendation_color",
]

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

_RULE = "══════════════════════════════════════════════════════════"
_GIB = 1024 * 1024 * 1024
_MAX_LISTED = 10
_UNIT = 1024
_PREFIXES = "KMGTPE"

_BOXED = TableFormat(
    lineabove=Line("+", "-", "+", "+"),
    linebelowheader=Line("+", "-", "+", "+"),
    linebetweenrows=None,
    linebelow=Line("+", "-", "+", "+"),
    headerrow=DataRow("|", "|", "|"),
    datarow=DataRow("|", "|", "|"),
    padding=1,
    with_header_hide=None,
)


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def format_size(size: int) -> str:
    """Render a byte count with a binary unit, e.g. ``1.5 KB``."""
    if size < _UNIT:
        return f"{size} B"
    div, exp = _UNIT, 0
    n = size // _UNIT
    while n >= _UNIT:
        div *= _UNIT
        exp += 1
        n //= _UNIT
    return f"{size / div:.1f} {_PREFIXES[exp]}B"


def show_welcome(out: TextIO | None = None) -> None:
    """Print the start-up banner."""
    out = _stream(out)
    lines = [
        CYAN + "┌─────────────────────────────────────────────┐" + RESET,
        CYAN + "│        " + WHITE + "SHURU HOJA - Filesystem Analyzer" + CYAN + "        │" + RESET,
        CYAN + "│    " + YELLOW + "Production-Safe • Read-Only • Enterprise" + CYAN + "   │" + RESET,
        CYAN + "└─────────────────────────────────────────────┘" + RESET,
        "",
        YELLOW + "⚠  Scanning filesystem... (This may take a while)" + RESET,
        YELLOW + "⚠  Running in read-only mode - No files will be modified" + RESET,
        "",
    ]
    print("\n".join(lines), file=out)


def render_results(
    results: Sequence[ScanResult],
    duration: timedelta | float,
    max_results: int,
    out: TextIO | None = None,
) -> None:
    """Print the summary, the top findings and the recommendations."""
    summary = calculate_summary(results)
    _show_summary(summary, duration, out)
    show_top_findings(results, max_results, out)
    show_recommendations(results, out)


def _show_summary(summary: Summary, duration: timedelta | float, out: TextIO | None) -> None:
    out = _stream(out)
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    print(file=out)
    print(CYAN + _RULE + RESET, file=out)
    print(WHITE + "                     SCAN SUMMARY" + RESET, file=out)
    print(CYAN + _RULE + RESET, file=out)
    rows = [
        ["Total Scanned:", f"{summary.total_scanned_bytes / _GIB:.2f} GB"],
        ["Total Files:", str(summary.total_scanned_files)],
        ["Total Directories:", str(summary.total_scanned_dirs)],
        ["Potential Cleanup:", f"{summary.potential_cleanup / _GIB:.2f} GB"],
        ["Critical Risk Items:", str(summary.critical_risk_count)],
        ["Caution Risk Items:", str(summary.caution_risk_count)],
        ["Scan Duration:", f"{seconds:.2f} seconds"],
    ]
    print(tabulate(rows, tablefmt="plain", disable_numparse=True), file=out)
    print(file=out)


def calculate_summary(results: Iterable[ScanResult]) -> Summary:
    """Total sizes, counts and risk tallies over ``results``."""
    summary = Summary()
    for r in results:
        summary.total_scanned_bytes += r.info.size
        if r.info.is_dir:
            summary.total_scanned_dirs += 1
        else:
            summary.total_scanned_files += 1
        if r.recommendation is Recommendation.DELETE:
            summary.potential_cleanup += r.info.size
        if r.risk_level is RiskLevel.CRITICAL:
            summary.critical_risk_count += 1
        elif r.risk_level is RiskLevel.CAUTION:
            summary.caution_risk_count += 1
    return summary


def show_top_findings(
    results: Iterable[ScanResult], max_results: int, out: TextIO | None = None
) -> None:
    """Print a table of results that carry a cleanup recommendation."""
    out = _stream(out)
    filtered: list[ScanResult] = []
    for r in results:
        if r.recommendation is not Recommendation.KEEP and r.risk_level is not RiskLevel.SAFE:
            filtered.append(r)
        if len(filtered) >= max_results:
            break

    if not filtered:
        print(GREEN + "✓ No cleanup recommendations found. System is clean!" + RESET, file=out)
        return

    print(CYAN + _RULE + RESET, file=out)
    print(WHITE + "                TOP CLEANUP RECOMMENDATIONS" + RESET, file=out)
    print(CYAN + _RULE + RESET, file=out)

    rows = [
        [
            format_size(r.info.size),
            str(r.type),
            get_risk_color(r.risk_level) + str(r.risk_level) + RESET,
            get_recommendation_color(r.recommendation) + str(r.recommendation) + RESET,
            truncate_path(r.info.path, 50),
        ]
        for r in filtered
    ]
    headers = ["SIZE", "TYPE", "RISK", "RECOMMENDATION", "PATH"]
    print(tabulate(rows, headers=headers, tablefmt=_BOXED, disable_numparse=True), file=out)


def truncate_path(path: str, max_length: int) -> str:
    """Shorten ``path`` by replacing its middle with an ellipsis."""
    if len(path) <= max_length:
        return path
    keep = int((max_length - 3) / 2)
    if keep < 0:
        raise ValueError(f"max_length too small to truncate: {max_length}")
    return path[:keep] + "..." + path[len(path) - keep:]


def get_risk_color(risk: RiskLevel) -> str:
    """Return the colour code for a risk level."""
    if risk is RiskLevel.CRITICAL:
        return RED
    if risk is RiskLevel.CAUTION:
        return YELLOW
    return GREEN


def get_recommendation_color(rec: Recommendation) -> str:
    """Return the colour code for a recommendation."""
    if rec is Recommendation.DELETE:
        return RED
    if rec is Recommendation.REVIEW:
        return YELLOW
    return GREEN


def _print_section(
    title: str, color: str, items: Sequence[ScanResult], out: TextIO
) -> None:
    print(file=out)
    print(color + _RULE + RESET, file=out)
    print(WHITE + title + RESET, file=out)
    print(color + _RULE + RESET, file=out)
    for r in items[:_MAX_LISTED]:
        print(
            f"{color}• {format_size(r.info.size)}{RESET} - "
            f"{truncate_path(r.info.path, 60)} ({r.reason}){RESET}",
            file=out,
        )


def show_recommendations(results: Iterable[ScanResult], out: TextIO | None = None) -> None:
    """List the critical deletions and the items needing review."""
    out = _stream(out)
    critical: list[ScanResult] = []
    caution: list[ScanResult] = []
    for r in results:
        if r.risk_level is RiskLevel.CRITICAL and r.recommendation is Recommendation.DELETE:
            critical.append(r)
        elif r.risk_level is RiskLevel.CAUTION and r.recommendation is Recommendation.REVIEW:
            caution.append(r)

    if critical:
        _print_section("                 CRITICAL RECOMMENDATIONS", RED, critical, out)
    if caution:
        _print_section("                  CAUTION RECOMMENDATIONS", YELLOW, caution, out)