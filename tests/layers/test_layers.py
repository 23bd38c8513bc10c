"""Tests for layer chains, merging and composing defaults."""

import pytest

from classdefaults import CloneSettings, Layer, Record, compose_defaults, merged_defaults
from classdefaults.core.descriptor import (
    AccessorDescriptor,
    DataDescriptor,
    PropertyDefinitionError,
    define_property,
    get_own_descriptor,
)


@pytest.fixture
def chain():
    """Three layers: base {foo, bar, biz}, mid {foo, bar}, leaf {foo}."""
    base = Layer({"foo": 0, "bar": 0, "biz": 0}, owner="Base")
    mid = base.derive({"foo": 1, "bar": 1}, owner="Mid")
    return mid.derive({"foo": 2}, owner="Leaf")


def test_chain_runs_root_to_leaf(chain):
    assert [layer.owner for layer in chain.chain()] == ["Base", "Mid", "Leaf"]


def test_later_layers_win_per_key(chain):
    merged = merged_defaults(chain)

    assert {key: d.value for key, d in merged.items()} == {"foo": 2, "bar": 1, "biz": 0}


def test_no_layer_means_no_defaults():
    assert merged_defaults(None) == {}


def test_override_replaces_nested_values_entirely():
    base = Layer({"arr": [1, 2, 3], "obj": {"z": {"y": {"x": 1}}}})
    child = base.derive({"arr": [], "obj": {}})
    grandchild = child.derive({"arr": [8, 7], "obj": {"a": {"b": {"c": 1}}}})

    assert merged_defaults(child)["obj"].value == {}
    assert merged_defaults(child)["arr"].value == []
    assert merged_defaults(grandchild)["obj"].value == {"a": {"b": {"c": 1}}}
    assert merged_defaults(grandchild)["arr"].value == [8, 7]


def test_merge_clones_declared_values_each_time():
    declared = {"items": [1]}
    layer = Layer(declared)

    first = merged_defaults(layer)["items"].value
    second = merged_defaults(layer)["items"].value

    assert first == second == [1]
    assert first is not second
    assert first is not declared["items"]


def test_property_declarations_become_accessors():
    prop = property(lambda self: self.val, lambda self, value: setattr(self, "val", value))
    layer = Layer({"val": "x", "prop": prop})

    descriptor = merged_defaults(layer)["prop"]

    assert isinstance(descriptor, AccessorDescriptor)
    assert descriptor.get is prop.fget
    assert descriptor.set is prop.fset


def test_explicit_descriptors_keep_flags():
    layer = Layer({"hidden": DataDescriptor([1], enumerable=False)})

    descriptor = merged_defaults(layer)["hidden"]

    assert descriptor == DataDescriptor([1], enumerable=False)


def test_record_declaration():
    declared = Record()
    define_property(declared, "fixed", DataDescriptor(1, writable=False))

    merged = merged_defaults(Layer(declared))

    assert merged["fixed"] == DataDescriptor(1, writable=False)


def test_compose_defaults_attaches_clones(chain):
    record = Record()

    compose_defaults(record, chain)

    assert (record.foo, record.bar, record.biz) == (2, 1, 0)


def test_compose_defaults_on_plain_object(point_cls):
    point = point_cls.__new__(point_cls)

    compose_defaults(point, Layer({"x": 5, "tags": []}))

    assert point.x == 5
    assert point.tags == []


def test_compose_defaults_rejects_accessors_on_plain_object(point_cls):
    point = point_cls()

    with pytest.raises(PropertyDefinitionError):
        compose_defaults(point, Layer({"size": property(len)}))


def test_compose_skips_locked_properties():
    record = Record()
    define_property(record, "version", DataDescriptor(7, writable=False))

    compose_defaults(record, Layer({"version": 1, "name": "x"}))

    assert record.version == 7
    assert record.name == "x"


def test_compose_warns_on_locked_skip_when_enabled():
    record = Record()
    define_property(record, "version", DataDescriptor(7, configurable=False))
    settings = CloneSettings(_env_file=None, warn_on_locked_skip=True)

    with pytest.warns(UserWarning, match="Default 'version' skipped"):
        compose_defaults(record, Layer({"version": 1}), settings=settings)

    assert get_own_descriptor(record, "version").value == 7


def test_declaration_edits_reach_only_later_merges():
    declared = {"val": "Initial", "obj": {"val": "Initial"}}
    layer = Layer(declared)

    before = Record()
    compose_defaults(before, layer)
    declared["val"] = "Modified"
    declared["obj"]["val"] = "Modified"
    after = Record()
    compose_defaults(after, layer)

    assert before.val == "Initial"
    assert before.obj["val"] == "Initial"
    assert after.val == "Modified"
    assert after.obj["val"] == "Modified"
