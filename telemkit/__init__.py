"""Typed telemetry values, subscription messages, statistics and a file-watcher interface."""

__version__ = "0.1.0"
__all__ = ["value", "stats", "watch", "messages"]