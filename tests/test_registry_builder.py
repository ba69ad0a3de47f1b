from collections import OrderedDict
from typing import Any, Dict

import pytest

from heteroreg import (
    BuilderState,
    CheckedKey,
    HeteroRegistry,
    IllegalStateError,
    InvalidArgumentError,
    Key,
    RegistryBuilder,
    TypeMismatchError,
)


def test_build_returns_unused_builder() -> None:
    builder = HeteroRegistry.build()
    assert isinstance(builder, RegistryBuilder)
    assert builder.state is BuilderState.UNUSED


def test_default_builder_creates_empty_registry() -> None:
    r = HeteroRegistry.build().instantiate()
    assert r.is_empty()


def test_custom_content_is_applied() -> None:
    k1 = CheckedKey(str)
    r = HeteroRegistry.build().with_custom_content({k1: "x"}).instantiate()
    assert r.get(k1) == "x"
    assert r.size() == 1


def test_custom_content_from_registry() -> None:
    source = HeteroRegistry()
    key = source.put("x")
    r = HeteroRegistry.build().with_custom_content(source).instantiate()
    assert r == source
    r.remove(key)
    assert source.get(key) == "x"


def test_custom_content_registry_changes_before_instantiate_are_applied() -> None:
    source = HeteroRegistry()
    first = source.put("x")
    builder = HeteroRegistry.build().with_custom_content(source)
    second = source.put(2)
    r = builder.instantiate()
    assert r.get(first) == "x"
    assert r.get(second) == 2
    assert r == source


def test_custom_inner_map_is_used_as_storage() -> None:
    inner: Dict[Any, Any] = OrderedDict()
    key = CheckedKey(int)
    r = HeteroRegistry.build().with_custom_inner_map(inner).instantiate()
    r.put(key, 1)
    assert inner == {key: 1}
    inner[key] = 2
    assert r.get(key) == 2


def test_prepopulated_inner_map_is_adopted() -> None:
    key = CheckedKey(str)
    other = CheckedKey(int)
    r = (
        HeteroRegistry.build()
        .with_custom_inner_map({key: "kept"})
        .with_custom_content({other: 5})
        .instantiate()
    )
    assert r.get(key) == "kept"
    assert r.get(other) == 5


def test_invalid_content_is_rejected_when_checked() -> None:
    builder = HeteroRegistry.build()
    with pytest.raises(InvalidArgumentError) as excinfo:
        builder.with_custom_content({CheckedKey(int): "one"})
    assert isinstance(excinfo.value.__cause__, TypeMismatchError)
    # builder is still usable after a rejected configuration
    assert builder.instantiate().is_empty()


def test_invalid_inner_map_is_rejected_when_checked() -> None:
    with pytest.raises(InvalidArgumentError):
        HeteroRegistry.build().with_custom_inner_map({CheckedKey(int): "one"})
    with pytest.raises(InvalidArgumentError):
        HeteroRegistry.build().with_custom_inner_map({"name": "value"})


def test_non_mapping_inner_map_is_rejected() -> None:
    with pytest.raises(TypeError):
        HeteroRegistry.build().with_custom_inner_map([1, 2])  # type: ignore[arg-type]


def test_without_map_checks_defers_content_failure_to_instantiate() -> None:
    builder = (
        HeteroRegistry.build()
        .without_map_checks()
        .with_custom_content({CheckedKey(int): "one"})
    )
    with pytest.raises(TypeMismatchError):
        builder.instantiate()


def test_without_map_checks_defers_inner_map_failure_to_read() -> None:
    key = CheckedKey(int)
    r = (
        HeteroRegistry.build()
        .without_map_checks()
        .with_custom_inner_map({key: "one"})
        .instantiate()
    )
    assert r.size() == 1
    with pytest.raises(TypeMismatchError):
        r.get(key)


def test_builder_is_one_shot() -> None:
    k1: Key[str] = Key.of(str)
    builder = HeteroRegistry.build().with_custom_content({k1: "x"})
    r = builder.instantiate()
    assert r.get(k1) == "x"
    assert builder.state is BuilderState.USED

    with pytest.raises(IllegalStateError):
        builder.instantiate()
    with pytest.raises(IllegalStateError):
        builder.with_custom_content({})
    with pytest.raises(IllegalStateError):
        builder.with_custom_inner_map({})
    with pytest.raises(IllegalStateError):
        builder.without_map_checks()


def test_builder_is_used_even_when_instantiate_fails() -> None:
    builder = HeteroRegistry.build().without_map_checks()
    builder.with_custom_content({CheckedKey(int): "one"})
    with pytest.raises(TypeMismatchError):
        builder.instantiate()
    with pytest.raises(IllegalStateError):
        builder.instantiate()


def test_illegal_state_is_a_runtime_error() -> None:
    builder = HeteroRegistry.build()
    builder.instantiate()
    with pytest.raises(RuntimeError):
        builder.instantiate()
