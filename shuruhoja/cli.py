"""Command-line entry point: scan a tree and report cleanup candidates."""

from __future__ import annotations

import argparse
import signal
import sys
import threading
import time
from concurrent.futures import CancelledError
from contextlib import contextmanager
from datetime import timedelta
from typing import Iterator, TextIO

from shuruhoja import ui
from shuruhoja.analyzer import Analyzer
from shuruhoja.config import load
from shuruhoja.scanner import ConcurrentScanner
from shuruhoja.types import ScanResult

VERSION = "1.0.0"

_BANNER = """
┌─────────────────────────────────────────────┐
│        SHURU HOJA - Filesystem Analyzer     │
│    Production-Safe • Read-Only • Enterprise │
└─────────────────────────────────────────────┘

███████╗██╗  ██╗██╗   ██╗██████╗ ██╗   ██╗    ██╗  ██╗ ██████╗ ███████╗ █████╗ 
██╔════╝██║  ██║██║   ██║██╔══██╗██║   ██║    ██║  ██║██╔═══██╗  ██║   ██╔══██╗
███████╗███████║██║   ██║██████╔╝██║   ██║    ███████║██║   ██║  ██║   ███████║
╚════██║██╔══██║██║   ██║██╔══██╗██║   ██║    ██╔══██║██║   ██║  ██║   ██╔══██║
███████║██║  ██║╚██████╔╝██║  ██║╚██████╔╝    ██║  ██║╚██████╔╝███╔╝   ██║  ██║
╚══════╝╚═╝  ╚═╝ ╚═════╝ ╚═╝  ╚═╝ ╚═════╝     ╚═╝  ╚═╝ ╚═════╝ ╚═╝  ╚═╝╚═╝  ╚═╝

Scanning for:
• Large files and directories
• Old log files (>30 days)
• Cache and temporary files
• Duplicate files

MODE: READ-ONLY - No files will be modified
"""


def show_banner(out: TextIO | None = None) -> None:
    """Print the large start-up banner."""
    print(_BANNER, file=out if out is not None else sys.stdout)


def run_analysis(
    root: str = "/", cancel_event: threading.Event | None = None
) -> list[ScanResult]:
    """Scan ``root``, print the report and return the classified results.

    Raises CancelledError if ``cancel_event`` is set during the scan, and
    RuntimeError if the analysis itself fails.
    """
    start = time.monotonic()
    cfg = load()
    scanner = ConcurrentScanner(cfg.general.max_workers)
    analyzer = Analyzer(scanner, cfg)

    ui.show_welcome()
    try:
        results = analyzer.analyze(root, cancel_event)
    except CancelledError:
        raise
    except OSError as exc:
        raise RuntimeError(f"analysis failed: {exc}") from exc

    duration = timedelta(seconds=time.monotonic() - start)
    ui.render_results(results, duration, cfg.output.max_results)
    return results


@contextmanager
def _cancel_on_signals(event: threading.Event) -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def handler(signum, frame) -> None:
        event.set()

    previous = {
        sig: signal.signal(sig, handler) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        yield
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="shuru-hoja", description="Read-only filesystem analyzer."
    )
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("path", nargs="?", default="/", help="Directory to scan")
    args = parser.parse_args(argv)

    if args.version:
        print(f"shuru hoja v{VERSION}")
        return 0

    cancel_event = threading.Event()
    try:
        with _cancel_on_signals(cancel_event):
            run_analysis(args.path, cancel_event)
    except (CancelledError, KeyboardInterrupt):
        print("\n\nScan interrupted by user. Exiting safely...")
        return 0
    except RuntimeError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())