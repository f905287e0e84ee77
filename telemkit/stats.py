"""Subscription statistics kept per subscribe mode, target and client."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

__all__ = ["TypeStats", "TargetStats", "ClientStats", "Stats"]


@dataclass
class TypeStats:
    """Counts for one subscribe mode, such as stream, once or poll."""

    active_subscription_count: int = 0
    subscription_count: int = 0


@dataclass
class TargetStats:
    """Counts for one target."""

    active_subscription_count: int = 0
    subscription_count: int = 0


@dataclass
class ClientStats:
    """State of one subscribing client."""

    target: str = ""
    coalesce_count: int = 0
    queue_size: int = 0


class Stats:
    """Thread-safe registry of statistics records.

    The lookup methods return the live record, creating it on first use; the
    ``all_*`` methods return snapshots that later updates do not affect.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._types: dict[str, TypeStats] = {}
        self._targets: dict[str, TargetStats] = {}
        self._clients: dict[str, ClientStats] = {}

    def all_type_stats(self) -> dict[str, TypeStats]:
        with self._lock:
            return {k: replace(v) for k, v in self._types.items()}

    def all_target_stats(self) -> dict[str, TargetStats]:
        with self._lock:
            return {k: replace(v) for k, v in self._targets.items()}

    def all_client_stats(self) -> dict[str, ClientStats]:
        with self._lock:
            return {k: replace(v) for k, v in self._clients.items()}

    def type_stats(self, typ: str) -> TypeStats:
        with self._lock:
            return self._types.setdefault(typ, TypeStats())

    def target_stats(self, target: str) -> TargetStats:
        with self._lock:
            return self._targets.setdefault(target, TargetStats())

    def client_stats(self, client: str, target: str) -> ClientStats:
        """Return the record for client, created with target if new."""
        with self._lock:
            st = self._clients.get(client)
            if st is None:
                st = ClientStats(target=target)
                self._clients[client] = st
            return st

    def remove_client_stats(self, client: str) -> None:
        with self._lock:
            self._clients.pop(client, None)