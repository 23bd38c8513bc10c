"""Tests for the Defaults base class and its layering sugar."""

import datetime
import re

import pytest

from classdefaults import Defaults, Record
from classdefaults.core.descriptor import AccessorDescriptor, get_own_descriptor, own_keys


def as_dict(instance):
    """Enumerable own properties as a plain dict."""
    return {key: instance[key] for key in instance}


class DataModel(Defaults):
    def __init__(self, data=None):
        for key, value in (data or {}).items():
            setattr(self, key, value)

    def class_method0(self):
        return 0


def test_extension_without_defaults():
    obj = DataModel({"biz": 0})

    assert as_dict(obj) == {"biz": 0}
    assert isinstance(obj, Record)
    assert DataModel.defaults.__func__ is Defaults.defaults.__func__
    assert obj.class_method0() == 0


def test_extension_with_defaults():
    class Base(DataModel.defaults({"foo": "bar", "biz": "THIS GETS OVERWRITTEN"})):
        pass

    obj = Base({"biz": "baz"})

    assert as_dict(obj) == {"foo": "bar", "biz": "baz"}
    assert obj.class_method0() == 0


def test_defaults_class_is_named_after_parent():
    layered = DataModel.defaults({"foo": 1})

    assert layered.__name__ == "DataModelDefaults"
    assert issubclass(layered, DataModel)
    assert layered.__module__ == DataModel.__module__


def test_secondary_extension_inherits_defaults():
    class Base(DataModel.defaults({"foo": 0})):
        pass

    class Child(Base):
        def class_method1(self):
            return 1

    obj = Child({"biz": "baz"})

    assert as_dict(obj) == {"foo": 0, "biz": "baz"}
    assert obj.class_method0() == 0
    assert obj.class_method1() == 1


def test_secondary_extension_adds_defaults():
    class Base(DataModel.defaults({"foo": 0})):
        pass

    class Child(Base.defaults({"bar": 1})):
        pass

    obj = Child({"biz": "baz"})

    assert as_dict(obj) == {"foo": 0, "bar": 1, "biz": "baz"}


def test_n_plus_one_extension():
    class Base(DataModel.defaults({"foo": 0, "bar": 0, "biz": 0})):
        pass

    class Child(Base.defaults({"foo": 1, "bar": 1})):
        pass

    class GrandChild(Child.defaults({"foo": 2})):
        pass

    obj = GrandChild({"baz": 3})

    assert as_dict(obj) == {"foo": 2, "bar": 1, "biz": 0, "baz": 3}
    # Parents are unaffected by their children's layers
    assert as_dict(Child()) == {"foo": 1, "bar": 1, "biz": 0}


def test_class_keyword_form():
    class Base(Defaults, defaults={"foo": 0, "bar": 0}):
        pass

    class Child(Base, defaults={"foo": 1}):
        pass

    assert as_dict(Child()) == {"foo": 1, "bar": 0}
    assert Child.__layer__.parent is Base.__layer__
    assert Child.__layer__.owner.endswith("Child")


def test_default_type_preservation():
    class TypesTest(
        Defaults.defaults(
            {
                "str": "bar",
                "num": 1,
                "bool": True,
                "date": datetime.datetime.now(),
                "regexp": re.compile("asdf"),
                "func": lambda: 1,
                "getandset": property(
                    lambda self: self.str, lambda self, value: setattr(self, "str", value)
                ),
            }
        )
    ):
        pass

    obj = TypesTest()

    assert obj.str == "bar"
    assert obj.num == 1
    assert obj.bool is True
    assert isinstance(obj.date, datetime.datetime)
    assert isinstance(obj.regexp, re.Pattern)
    assert obj.func() == 1
    assert obj.getandset == "bar"
    descriptor = get_own_descriptor(obj, "getandset")
    assert isinstance(descriptor, AccessorDescriptor)
    assert callable(descriptor.get)
    assert callable(descriptor.set)

    obj.getandset = "baz"
    assert obj.str == "baz"


def test_deep_default_inheritance_replaces_values():
    class Base(Defaults.defaults({"arr": [1, 2, 3, 4, 5], "obj": {"z": {"y": {"x": 1}}}})):
        pass

    class Child(Base.defaults({"arr": [], "obj": {}})):
        pass

    class GrandChild(
        Child.defaults({"arr": [8, 7, 6, 5, 4, 3, 2, 1], "obj": {"a": {"b": {"c": 1}}}})
    ):
        pass

    instance = Child()
    assert instance.arr == []
    assert instance.obj == {}

    instance = GrandChild()
    assert instance.arr == [8, 7, 6, 5, 4, 3, 2, 1]
    assert instance.obj == {"a": {"b": {"c": 1}}}


def test_default_property_mutability():
    values = {
        "val": "Initial",
        "obj": {"val": "Initial"},
        "prop": property(lambda self: self.val, lambda self, value: setattr(self, "val", value)),
    }

    class MutabilityTest(Defaults.defaults(values)):
        pass

    instance = MutabilityTest()

    # Direct properties
    values["val"] = "Modified-0"
    assert instance.val == "Initial"
    assert MutabilityTest().val == "Modified-0"

    instance.val = "Modified-1"
    assert values["val"] == "Modified-0"

    # Nested properties
    values["obj"]["val"] = "Modified-0"
    assert instance.obj["val"] == "Initial"
    assert MutabilityTest().obj["val"] == "Modified-0"

    instance.obj["val"] = "Modified-1"
    assert values["obj"]["val"] == "Modified-0"


def test_instances_never_share_defaults():
    class Trainer(Defaults.defaults({"pokemon": []})):
        pass

    first = Trainer()
    second = Trainer()
    first.pokemon.append("Blaziken")

    assert first.pokemon == ["Blaziken"]
    assert second.pokemon == []


def test_defaults_attached_before_init():
    seen = {}

    class Base(Defaults.defaults({"layer": 0, "items": [1]})):
        def __init__(self):
            seen["layer"] = self.layer
            seen["items"] = list(self.items)
            self.layer = 1

    class Child(Base.defaults({"layer": 2})):
        def __init__(self):
            seen["child_layer"] = self.layer
            super().__init__()
            self.child = True

    obj = Child()

    assert seen == {"child_layer": 2, "layer": 2, "items": [1]}
    assert obj.layer == 1
    assert obj.child is True


def test_shadowing_a_method_warns():
    class Base(Defaults):
        def greet(self):
            return "hi"

    with pytest.warns(UserWarning, match="shadows a method"):

        class Child(Base, defaults={"greet": "hello"}):
            pass

    assert Child().greet == "hello"


def test_adding_a_base_class():
    class BaseClass:
        @property
        def foo(self):
            return True

    extended = Defaults.extends(BaseClass)
    assert extended.defaults.__func__ is Defaults.defaults.__func__

    class BaseTest(extended.defaults({"biz": "baz"})):
        pass

    instance = BaseTest()

    assert BaseTest.defaults.__func__ is Defaults.defaults.__func__
    assert instance.foo is True
    assert instance.biz == "baz"
    assert isinstance(instance, BaseClass)
    with pytest.raises(TypeError, match="only available on Defaults"):
        BaseTest.extends(BaseClass)


def test_extends_passes_arguments_to_base_init():
    class Vessel:
        def __init__(self, name, crew=0):
            self.name = name
            self.crew = crew

    class Ship(Defaults.extends(Vessel).defaults({"captain": "Kirk", "crew": 5})):
        pass

    ship = Ship("Enterprise", crew=430)

    assert ship.name == "Enterprise"
    assert ship.captain == "Kirk"
    # Defaults replace what the base class assigned
    assert ship.crew == 5


def test_extends_attaches_defaults_after_base_init():
    seen = {}

    class Vessel:
        def __init__(self):
            seen["base_sees_default"] = "captain" in own_keys(self)
            self.captain = "Pike"

    class Ship(Defaults.extends(Vessel).defaults({"captain": "Kirk", "log": []})):
        def __init__(self):
            super().__init__()
            seen["captain"] = self.captain
            self.log.append("launched")

    first = Ship()
    second = Ship()

    assert seen == {"base_sees_default": False, "captain": "Kirk"}
    assert first.log == ["launched"]
    assert first.log is not second.log
