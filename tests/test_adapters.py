"""Tests for single-key container lookups."""

from collections import OrderedDict
from types import SimpleNamespace

from pathwalk import (
    PATH_MISSING,
    AttributeAdapter,
    MappingAdapter,
    SequenceAdapter,
    default_adapters,
    lookup_key,
)
from pathwalk.testing import pathwalk_test_env


def test_mapping_adapter_prefers_string_keys() -> None:
    adapter = MappingAdapter()

    assert adapter.supports(OrderedDict())
    assert adapter.lookup({"0": "str", 0: "int"}, "0") == "str"
    assert adapter.lookup({0: "int"}, "0") == "int"
    assert adapter.lookup({"a": 1}, "b") is PATH_MISSING


def test_sequence_adapter_indexes_non_string_sequences() -> None:
    adapter = SequenceAdapter()

    assert adapter.supports([1])
    assert adapter.supports((1,))
    assert not adapter.supports("abc")
    assert not adapter.supports(b"abc")
    assert adapter.lookup((10, 20), "1") == 20
    assert adapter.lookup([10, 20], "2") is PATH_MISSING
    assert adapter.lookup([10, 20], "first") is PATH_MISSING
    assert adapter.lookup([10, 20], "") is PATH_MISSING


def test_attribute_adapter_reads_public_attributes_only() -> None:
    adapter = AttributeAdapter()
    obj = SimpleNamespace(name="n", _secret="s")

    assert adapter.lookup(obj, "name") == "n"
    assert adapter.lookup(obj, "_secret") is PATH_MISSING
    assert adapter.lookup(obj, "other") is PATH_MISSING
    assert not adapter.supports(None)
    assert not adapter.supports(PATH_MISSING)


def test_lookup_key_uses_first_supporting_adapter() -> None:
    assert lookup_key({"a": 1}, "a") == 1
    assert lookup_key(["x", "y"], "1") == "y"
    assert lookup_key(SimpleNamespace(a=2), "a") == 2
    assert lookup_key(None, "a") is PATH_MISSING
    assert lookup_key(PATH_MISSING, "a") is PATH_MISSING
    assert lookup_key(["x"], "0", adapters=[MappingAdapter()]) is PATH_MISSING


def test_default_adapters_follow_config() -> None:
    with pathwalk_test_env(attribute_access=True):
        assert any(isinstance(a, AttributeAdapter) for a in default_adapters())
    with pathwalk_test_env(attribute_access=False):
        assert not any(isinstance(a, AttributeAdapter) for a in default_adapters())
        assert lookup_key(SimpleNamespace(a=2), "a") is PATH_MISSING


def test_path_missing_is_falsy_singleton() -> None:
    import copy
    import pickle

    assert not PATH_MISSING
    assert repr(PATH_MISSING) == "PATH_MISSING"
    assert copy.deepcopy(PATH_MISSING) is PATH_MISSING
    assert pickle.loads(pickle.dumps(PATH_MISSING)) is PATH_MISSING
    assert type(PATH_MISSING)() is PATH_MISSING


class _Exploding:
    @property
    def value(self) -> int:
        raise RuntimeError("boom")

    def compute(self) -> int:
        return 1


def test_attribute_adapter_treats_scalars_as_leaves() -> None:
    adapter = AttributeAdapter()

    for leaf in ("abc", b"abc", bytearray(b"a"), 5, 1.5, 2j, True):
        assert not adapter.supports(leaf)
        assert lookup_key(leaf, "real") is PATH_MISSING


def test_attribute_adapter_skips_methods_and_raising_getters() -> None:
    adapter = AttributeAdapter()
    obj = _Exploding()

    assert adapter.lookup(obj, "value") is PATH_MISSING
    assert adapter.lookup(obj, "compute") is PATH_MISSING
    assert adapter.lookup(SimpleNamespace(items=[1]), "items") == [1]
