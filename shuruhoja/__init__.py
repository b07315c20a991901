"""Read-only filesystem analyzer: scanner, log-file detector, configuration and terminal report."""

__version__ = "1.0.0"