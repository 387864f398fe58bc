from __future__ import annotations

from collections.abc import Hashable, Mapping
from threading import RLock
from typing import TypeVar

from anystore.binding import BindMode
from anystore.errors import StoreError
from anystore.mapping import ExactKeyDict
from anystore.observability.logging import LogSink
from anystore.store import Store

T = TypeVar("T")


class SynchronizedStore:
    """Lock-guarded wrapper exposing the Store API.

    Every operation runs under one re-entrant lock. ``underlying()`` still
    hands out the live mapping; access through it is outside the lock.
    """

    __slots__ = ("_store", "_lock")

    def __init__(self, store: Store | None = None) -> None:
        self._store = Store() if store is None else store
        self._lock = RLock()

    @classmethod
    def new(cls, *, bind_mode: BindMode = BindMode.KIND, log_sink: LogSink | None = None) -> SynchronizedStore:
        return cls(Store(bind_mode=bind_mode, log_sink=log_sink))

    @property
    def store(self) -> Store:
        return self._store

    @property
    def bind_mode(self) -> BindMode:
        return self._store.bind_mode

    @property
    def log_sink(self) -> LogSink | None:
        return self._store.log_sink

    def close(self) -> None:
        with self._lock:
            self._store.close()

    def add(self, key: Hashable, value: object) -> SynchronizedStore:
        with self._lock:
            self._store.add(key, value)
        return self

    def append(self, entries: Mapping[Hashable, object] | None) -> SynchronizedStore:
        with self._lock:
            self._store.append(entries)
        return self

    def with_entries(self, entries: Mapping[Hashable, object] | None) -> SynchronizedStore:
        with self._lock:
            self._store.with_entries(entries)
        return self

    def get(self, key: Hashable) -> tuple[object | None, bool]:
        with self._lock:
            return self._store.get(key)

    def underlying(self) -> ExactKeyDict:
        return self._store.underlying()

    def must_get(self, key: Hashable) -> object:
        with self._lock:
            return self._store.must_get(key)

    def bind(self, key: Hashable, destination: object) -> StoreError | None:
        with self._lock:
            return self._store.bind(key, destination)

    def extract(self, key: Hashable, target_type: type[T]) -> T:
        with self._lock:
            return self._store.extract(key, target_type)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __repr__(self) -> str:
        with self._lock:
            return f"Synchronized{self._store!r}"
