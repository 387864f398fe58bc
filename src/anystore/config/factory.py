from __future__ import annotations

from pathlib import Path

from anystore.config.models import LoggingSection, StoreConfig
from anystore.observability.logging import JsonlLogSink, LogSink, StdoutLogSink
from anystore.store import Store
from anystore.synchronized import SynchronizedStore


def build_log_sink(section: LoggingSection) -> LogSink | None:
    if section.sink == "stdout":
        return StdoutLogSink()
    if section.sink == "jsonl":
        # The model validator guarantees a path for jsonl.
        return JsonlLogSink(Path(section.path or ""))
    return None


def build_store(config: StoreConfig | None = None) -> Store | SynchronizedStore:
    # Wiring entry point: one store per call, sink created alongside it.
    config = StoreConfig() if config is None else config
    store = Store(bind_mode=config.store.bind_mode, log_sink=build_log_sink(config.logging))
    if config.store.synchronized:
        return SynchronizedStore(store)
    return store
