"""Interface for detecting raw changes to files."""

from __future__ import annotations

import abc
from dataclasses import dataclass

__all__ = ["Update", "Watcher"]


@dataclass
class Update:
    """Contents of a file, or the problem reading it.

    ``path`` may name one file among many when watching a path that fans out.
    """

    path: str
    contents: bytes = b""
    err: Exception | None = None


class Watcher(abc.ABC):
    """Watches files at given paths for changes.

    The format of paths is specific to the underlying filesystem.
    """

    @abc.abstractmethod
    def read(self, timeout: float | None = None) -> Update:
        """Block until the next update for a file and return it.

        When several updates have occurred for a file, the latest is returned.
        Raises TimeoutError if timeout seconds pass first, and another
        exception on an underlying failure, which may require a new Watcher.
        """

    @abc.abstractmethod
    def add(self, path: str) -> None:
        """Start monitoring path; has no effect after close."""

    @abc.abstractmethod
    def remove(self, path: str) -> None:
        """Stop monitoring a path given earlier to add, in the same format."""

    @abc.abstractmethod
    def close(self) -> None:
        """Stop watching all files and release resources."""

    def __enter__(self) -> Watcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()