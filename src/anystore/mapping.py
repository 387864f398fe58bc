from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, MutableMapping


def _slot(key: Hashable) -> tuple[type, Hashable]:
    # Python merges 1, 1.0 and True into one dict key; the type makes them distinct,
    # including inside tuple and frozenset keys.
    if isinstance(key, tuple):
        return (type(key), tuple(_slot(item) for item in key))
    if isinstance(key, frozenset):
        return (type(key), frozenset(_slot(item) for item in key))
    return (type(key), key)


class ExactKeyDict(MutableMapping[Hashable, object]):
    """Mapping whose keys are identified by type and value together.

    Behaves like a ``dict`` for everything else: insertion order is kept,
    iteration yields the original keys, and it compares equal to any mapping
    with the same items. Unhashable keys raise ``TypeError`` on every access,
    membership tests included, as with ``dict``.
    """

    __slots__ = ("_data",)

    def __init__(self, entries: Mapping[Hashable, object] | None = None) -> None:
        self._data: dict[tuple[type, Hashable], tuple[Hashable, object]] = {}
        if entries:
            self.update(entries)

    def __getitem__(self, key: Hashable) -> object:
        try:
            return self._data[_slot(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: Hashable, value: object) -> None:
        self._data[_slot(key)] = (key, value)

    def __delitem__(self, key: Hashable) -> None:
        try:
            del self._data[_slot(key)]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return _slot(key) in self._data  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Hashable]:
        for key, _ in self._data.values():
            yield key

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExactKeyDict):
            return self._data == other._data
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(other) != len(self):
            return False
        # Plain mappings cannot tell 1 from True, so compare through their own lookup.
        for key, value in self.items():
            if key not in other or other[key] != value:
                return False
        return True

    def copy(self) -> ExactKeyDict:
        clone = ExactKeyDict()
        clone._data = dict(self._data)
        return clone

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"ExactKeyDict({{{body}}})"
