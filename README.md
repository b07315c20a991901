# shuruhoja

A read-only filesystem analyzer. It walks a directory tree with a pool of
worker threads, classifies every entry it finds, and prints a summary, a
table of the top cleanup candidates and a list of recommendations. It never
modifies or deletes anything.

## Installation

```
pip install .
```

## Usage

Scan the whole filesystem (the default root is `/`):

```
shuru-hoja
```

Scan one directory:

```
shuru-hoja /var/log
```

Show the version:

```
shuru-hoja --version
```

Directories that cannot be listed, and entries that cannot be stat'ed, are
reported as `Warning: ...` lines on standard error and the scan carries on.
Pressing Ctrl-C (or sending SIGTERM) stops the scan; the command prints
`Scan interrupted by user. Exiting safely...` and exits with status 0. If the
analysis fails it prints `Error: ...` and exits with status 1.

## What it looks for

- Log files: any file whose name contains `.log`, `.journal`, `.gz` or
  `.bz2`, or whose path contains `/var/log/` or `/var/logs/`. Logs older than
  `log_file_age_days` are flagged: those over 100 MB as *Critical / Delete*,
  smaller ones as *Caution / Review*. Younger logs are *Safe / Keep*.
- Every other file and directory is recorded as *Safe / Keep*, so its size
  still counts in the totals.

The scanner skips entries whose full path is exactly `/proc`, `/sys`, `/dev`
or `/run`, and entries named `.snapshot` or `.zfs` when they sit at the root.
Symbolic links are not followed.

The report lists up to `max_results` findings in the table, and at most ten
entries in each of the critical and caution recommendation lists. Results are
ordered largest first.

## Configuration

Settings are read from `/etc/shuruhoja.conf`, or from
`~/.config/shuruhoja.conf` when the first cannot be read. When neither can be
read, `Using default configuration` is printed and built-in defaults are used.
The format is a simple INI-style file; blank lines and lines starting with `#`
are ignored, and values that are not whole numbers are ignored where a number
is expected:

```
[general]
max_workers = 50
skip_paths = /proc,/sys,/dev,/run
max_depth = 0

[detection]
log_file_age_days = 30
orphan_dir_age_days = 90
```

Only the five keys above are read from a file; every other setting of
`Config` keeps its default.

## Library use

The pieces can be used on their own:

```python
from shuruhoja.config import default_config
from shuruhoja.scanner import ConcurrentScanner
from shuruhoja.analyzer import Analyzer
from shuruhoja.ui import render_results

cfg = default_config()
analyzer = Analyzer(ConcurrentScanner(cfg.general.max_workers), cfg)
results = analyzer.analyze("/var/log")
render_results(results, 1.5, cfg.output.max_results)
```

- `shuruhoja.scanner.ConcurrentScanner.scan(root, cancel_event)` yields a
  `FileInfo` for each entry and an `OSError` for each problem met
  (`ScanPermissionError` for an unlistable directory); `stats()` returns a
  `ScanStats` with file, directory, byte and error counts. `Walker` decides
  whether a path lies under any of a set of directories.
- `shuruhoja.analyzer.Analyzer.analyze` raises
  `concurrent.futures.CancelledError` when its `cancel_event` is set.
- `shuruhoja.detectors` holds the `Detector` base class and
  `LogFileDetector`.
- `shuruhoja.ui` also provides `format_size`, `truncate_path`,
  `calculate_summary`, `show_top_findings` and `show_recommendations`; each
  printing function takes an optional `out` stream.
- `shuruhoja.safety` offers `is_safe_to_scan`, `is_system_directory`,
  `is_dangerous_path`, `has_read_permission` and `set_resource_limits`
  (address-space and open-file limits, POSIX only).

## What it does not do

- Only log files are detected. The start-up banner printed by
  `shuruhoja.cli.show_banner` mentions caches, temporary files and
  duplicates, but no detector for them exists, and the cache, orphan,
  duplicate and risk thresholds in `Config` are not used.
- `skip_paths` and `max_depth` are read into the configuration but the
  scanner does not use them, and the command does not call the checks in
  `shuruhoja.safety` or apply resource limits.
- Output is always a coloured text table; the `format` and `color` output
  settings have no effect.