from __future__ import annotations


class StoreError(Exception):
    # Common base so callers can catch every store failure in one clause.
    pass


class KeyNotExistError(StoreError, KeyError):
    # Raised by must_get/extract and returned by bind when the key is absent.
    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key {self.key!r} is not found"


class InvalidBindError(StoreError, TypeError):
    # The bind destination is None, not a Ref, or a nil Ref.
    def __init__(self, destination: object, descriptor: str) -> None:
        super().__init__(descriptor)
        self.destination = destination
        self.descriptor = descriptor

    def __str__(self) -> str:
        return f"Store: Bind({self.descriptor})"


class BindTypeMismatchError(StoreError, TypeError):
    # Destination type and stored value type fall into different kinds.
    def __init__(self, expect: type, actual: type) -> None:
        super().__init__(expect, actual)
        self.expect = expect
        self.actual = actual

    def __str__(self) -> str:
        return f"expect type: {type_name(self.expect)}, actual type: {type_name(self.actual)}"


def type_name(tp: type) -> str:
    # Builtins render bare ("int"), everything else module-qualified.
    module = getattr(tp, "__module__", None)
    qualname = getattr(tp, "__qualname__", repr(tp))
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"
