from __future__ import annotations

import pytest

from anystore.mapping import ExactKeyDict


def test_exact_key_dict_keeps_numeric_keys_apart() -> None:
    # 1, 1.0 and True are three entries.
    mapping = ExactKeyDict()
    mapping[1] = "int"
    mapping[1.0] = "float"
    mapping[True] = "bool"
    assert len(mapping) == 3
    assert list(mapping) == [1, 1.0, True]
    assert [type(key) for key in mapping] == [int, float, bool]


def test_exact_key_dict_missing_key_raises_key_error_with_original_key() -> None:
    # KeyError carries the caller's key, not the internal slot.
    mapping = ExactKeyDict({"a": 1})
    with pytest.raises(KeyError) as exc:
        mapping["b"]
    assert exc.value.args == ("b",)
    with pytest.raises(KeyError):
        del mapping["b"]


def test_exact_key_dict_unhashable_lookups_raise_like_dict() -> None:
    # Membership, get and item access all reject unhashable keys.
    mapping = ExactKeyDict({"a": 1})
    with pytest.raises(TypeError):
        [1] in mapping
    with pytest.raises(TypeError):
        mapping.get([1])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        mapping[[1]]  # type: ignore[index]


def test_exact_key_dict_keeps_numeric_keys_apart_inside_tuples_and_frozensets() -> None:
    # Element types count too: (1,) and (True,) are different keys.
    mapping = ExactKeyDict()
    mapping[(1,)] = "int"
    mapping[(True,)] = "bool"
    mapping[frozenset({1.0})] = "float"
    mapping[("a", (1, frozenset({2})))] = "nested"
    assert len(mapping) == 4
    assert mapping[(1,)] == "int"
    assert mapping[(True,)] == "bool"
    assert frozenset({1}) not in mapping
    assert mapping.get(frozenset({1})) is None
    assert mapping[frozenset({1.0})] == "float"
    assert ("a", (1, frozenset({2.0}))) not in mapping
    assert mapping[("a", (1, frozenset({2})))] == "nested"


def test_exact_key_dict_rejects_unhashable_keys_on_write() -> None:
    # Writes behave like dict for unhashable keys.
    with pytest.raises(TypeError):
        ExactKeyDict()[[1]] = "x"  # type: ignore[index]


def test_exact_key_dict_equality() -> None:
    # Equal to plain mappings with the same items; type-aware against itself.
    assert ExactKeyDict({"a": 1}) == {"a": 1}
    assert {"a": 1} == ExactKeyDict({"a": 1})
    assert ExactKeyDict({"a": 1}) != {"a": 2}
    assert ExactKeyDict({1: "x"}) != ExactKeyDict({True: "x"})
    assert ExactKeyDict({"a": 1}) != [("a", 1)]


def test_exact_key_dict_copy_is_independent() -> None:
    # copy() detaches from the original.
    mapping = ExactKeyDict({"a": 1})
    clone = mapping.copy()
    clone["b"] = 2
    assert "b" not in mapping
    assert clone == {"a": 1, "b": 2}


def test_exact_key_dict_mutable_mapping_helpers() -> None:
    # Mixin methods (get/pop/update/setdefault) work on top of the slots.
    mapping = ExactKeyDict()
    mapping.update({"a": 1})
    assert mapping.setdefault("b", 2) == 2
    assert mapping.get("c") is None
    assert mapping.pop("a") == 1
    assert dict(mapping.items()) == {"b": 2}
    assert repr(mapping) == "ExactKeyDict({'b': 2})"
