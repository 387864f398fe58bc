from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TypeVar

from anystore.binding import BindMode, Ref, bind_value
from anystore.errors import KeyNotExistError, StoreError
from anystore.mapping import ExactKeyDict
from anystore.observability.logging import LogMessage, LogSink

T = TypeVar("T")

_MISSING = object()


class Store:
    """Container of arbitrary values indexed by arbitrary hashable keys.

    Keys are matched on type and value, so ``"1"`` and ``1`` never collide.
    Mutators return the store itself for chaining::

        store = Store.new().add("user", "alice").add("age", 31)
        out = Ref(str, "")
        assert store.bind("user", out) is None and out.value == "alice"

    Not thread-safe: concurrent mutation (including through ``underlying()``)
    must be synchronized by the caller, or use ``SynchronizedStore``.
    """

    __slots__ = ("_entries", "_bind_mode", "_log_sink")

    def __init__(self, *, bind_mode: BindMode = BindMode.KIND, log_sink: LogSink | None = None) -> None:
        self._entries = ExactKeyDict()
        self._bind_mode = BindMode(bind_mode)
        self._log_sink = log_sink

    @classmethod
    def new(cls, *, bind_mode: BindMode = BindMode.KIND, log_sink: LogSink | None = None) -> Store:
        return cls(bind_mode=bind_mode, log_sink=log_sink)

    @property
    def bind_mode(self) -> BindMode:
        return self._bind_mode

    @property
    def log_sink(self) -> LogSink | None:
        return self._log_sink

    def close(self) -> None:
        # Releases the sink (e.g. the JSONL file handle); entries stay readable.
        close = getattr(self._log_sink, "close", None)
        if callable(close):
            close()
        self._log_sink = None

    def add(self, key: Hashable, value: object) -> Store:
        self._entries[key] = value
        return self

    def append(self, entries: Mapping[Hashable, object] | None) -> Store:
        # Incoming values win over existing ones.
        if not entries:
            return self
        for key, value in entries.items():
            self.add(key, value)
        return self

    def with_entries(self, entries: Mapping[Hashable, object] | None) -> Store:
        """Replace the whole backing mapping with ``entries``.

        Empty or ``None`` input is a no-op: the current entries are kept, not
        cleared. An ``ExactKeyDict`` is adopted as the live backing mapping;
        other mappings are copied so key matching stays exact.
        """
        if not entries:
            return self
        if isinstance(entries, ExactKeyDict):
            self._entries = entries
        else:
            self._entries = ExactKeyDict(entries)
        self._log("debug", "store.with_entries", size=len(self._entries))
        return self

    def get(self, key: Hashable) -> tuple[object | None, bool]:
        value = self._entries.get(key, _MISSING)
        if value is _MISSING:
            return None, False
        return value, True

    def underlying(self) -> ExactKeyDict:
        # Live backing mapping, not a copy; writes through it are visible here.
        return self._entries

    def must_get(self, key: Hashable) -> object:
        value, ok = self.get(key)
        if not ok:
            self._log("error", "store.must_get_missing", key=key)
            raise KeyNotExistError(key)
        return value

    def bind(self, key: Hashable, destination: object) -> StoreError | None:
        """Copy the value under ``key`` into ``destination`` (a ``Ref``).

        Returns the failure instead of raising, checked in this order:
        ``KeyNotExistError`` for a missing key, ``InvalidBindError`` when the
        destination is None, not a Ref, or a nil Ref, and
        ``BindTypeMismatchError`` when the kinds differ. On failure the
        destination is left untouched.
        """
        value, ok = self.get(key)
        if not ok:
            error: StoreError | None = KeyNotExistError(key)
        else:
            error = bind_value(destination, value, self._bind_mode)
        if error is not None:
            self._log("warning", "store.bind_failed", key=key, error=type(error).__name__, reason=str(error))
        return error

    def extract(self, key: Hashable, target_type: type[T]) -> T:
        # Raising counterpart of bind for callers that want the value back directly.
        destination: Ref[T] = Ref(target_type)
        error = self.bind(key, destination)
        if error is not None:
            raise error
        return destination.value  # type: ignore[return-value]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Store({self._entries!r}, bind_mode={self._bind_mode.value!r})"

    def _log(self, level: str, message: str, **fields: object) -> None:
        if self._log_sink is None:
            return
        if "key" in fields:
            fields["key"] = repr(fields["key"])
        self._log_sink.emit(LogMessage(level=level, message=message, fields=fields))
