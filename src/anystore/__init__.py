# Type-erased key-value store with kind-checked bind into typed references.

from anystore.binding import BindMode, Kind, Ref, kind_of
from anystore.errors import BindTypeMismatchError, InvalidBindError, KeyNotExistError, StoreError
from anystore.mapping import ExactKeyDict
from anystore.store import Store
from anystore.synchronized import SynchronizedStore

__all__ = [
    "BindMode",
    "BindTypeMismatchError",
    "ExactKeyDict",
    "InvalidBindError",
    "KeyNotExistError",
    "Kind",
    "Ref",
    "Store",
    "StoreError",
    "SynchronizedStore",
    "kind_of",
]
