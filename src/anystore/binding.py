from __future__ import annotations

import types
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from numbers import Complex, Integral, Real
from typing import Generic, TypeVar

from anystore.errors import BindTypeMismatchError, InvalidBindError, StoreError, type_name

T = TypeVar("T")


class Kind(str, Enum):
    # Coarse runtime categories compared by bind; deliberately looser than type identity.
    NONE = "none"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    BYTES = "bytes"
    LIST = "list"
    TUPLE = "tuple"
    MAP = "map"
    SET = "set"
    FUNC = "func"
    TYPE = "type"
    STRUCT = "struct"


class BindMode(str, Enum):
    KIND = "kind"
    TYPE = "type"


# Order matters: bool before int, str/bytes before the generic Sequence check.
_KIND_TABLE: tuple[tuple[tuple[type, ...], Kind], ...] = (
    ((types.NoneType,), Kind.NONE),
    ((bool,), Kind.BOOL),
    ((Integral,), Kind.INT),
    ((Real,), Kind.FLOAT),
    ((Complex,), Kind.COMPLEX),
    ((str,), Kind.STRING),
    ((bytes, bytearray, memoryview), Kind.BYTES),
    ((tuple,), Kind.TUPLE),
    ((Mapping,), Kind.MAP),
    ((Set,), Kind.SET),
    ((Sequence,), Kind.LIST),
    ((type,), Kind.TYPE),
    (
        (types.FunctionType, types.BuiltinFunctionType, types.MethodType, types.BuiltinMethodType, partial),
        Kind.FUNC,
    ),
)


def kind_of(tp: type) -> Kind:
    """Classify a type into its coarse Kind.

    Abstract bases from ``numbers`` and ``collections.abc`` are honoured, so
    ``Fraction`` is a FLOAT and ``OrderedDict`` a MAP. Named tuples are TUPLEs.
    Plain classes (dataclasses, user objects) fall through to STRUCT, even
    when they define ``__call__``: only real functions, methods and
    ``functools.partial`` objects are FUNC.
    """
    if not isinstance(tp, type):
        raise TypeError(f"kind_of expects a type, got {tp!r}")
    for bases, kind in _KIND_TABLE:
        if issubclass(tp, bases):
            return kind
    return Kind.STRUCT


def kind_of_value(value: object) -> Kind:
    return kind_of(type(value))


@dataclass(slots=True, eq=False)
class Ref(Generic[T]):
    # Mutable destination for Store.bind: a typed cell standing in for "pointer to a variable".
    target_type: type[T]
    value: T | None = None
    is_nil: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if not isinstance(self.target_type, type):
            raise TypeError(f"Ref.target_type must be a type, got {self.target_type!r}")
        if self.is_nil and self.value is not None:
            raise ValueError("nil Ref cannot hold a value")

    @classmethod
    def nil(cls, target_type: type[T]) -> Ref[T]:
        # Typed reference with no storage; every bind into it is rejected.
        return cls(target_type, is_nil=True)

    @property
    def kind(self) -> Kind:
        return kind_of(self.target_type)

    def set(self, value: T) -> None:
        if self.is_nil:
            raise InvalidBindError(self, describe_destination(self))
        self.value = value

    def __repr__(self) -> str:
        if self.is_nil:
            return f"Ref.nil({type_name(self.target_type)})"
        return f"Ref({type_name(self.target_type)}, {self.value!r})"


def describe_destination(destination: object) -> str:
    # Human-readable summary of an unusable bind destination.
    if destination is None:
        return "nil"
    if not isinstance(destination, Ref):
        return f"non-pointer {type_name(type(destination))}"
    return f"{type_name(destination.target_type)} pointer is nil"


def check_compatible(destination: Ref[object], value: object, mode: BindMode) -> BindTypeMismatchError | None:
    actual = type(value)
    if mode is BindMode.TYPE:
        matches = isinstance(value, destination.target_type)
    else:
        matches = destination.kind is kind_of_value(value)
    if matches:
        return None
    return BindTypeMismatchError(expect=destination.target_type, actual=actual)


def bind_value(destination: object, value: object, mode: BindMode = BindMode.KIND) -> StoreError | None:
    """Validate ``destination`` and copy ``value`` into it.

    Destination validity is checked before compatibility; the destination is
    only written when both checks pass.
    """
    if not isinstance(destination, Ref) or destination.is_nil:
        return InvalidBindError(destination, describe_destination(destination))
    mismatch = check_compatible(destination, value, mode)
    if mismatch is not None:
        return mismatch
    destination.set(value)
    return None
