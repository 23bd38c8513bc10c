"""Class sugar for layered defaults.

Usage:
    class Root(Defaults.defaults({"layer": 0, "obj": {"foo": "bar"}})):
        pass

    class Child(Root):
        def __init__(self):
            self.layer = 1          # defaults are already in place

    class GrandChild(Child, defaults={"layer": 2, "obj": {"biz": "baz"}}):
        pass

    GrandChild()   # GrandChild(layer=1, obj={'biz': 'baz'})

Every instance gets its own clone of the defaults, attached in `__new__`, so
every `__init__` in the hierarchy already sees them. Classes grafted onto a
foreign base with `Defaults.extends()` attach them after the base initializes.
"""

from __future__ import annotations

import inspect
import types
import warnings
from collections.abc import Callable, Hashable, Mapping
from typing import Any, ClassVar, Self

from classdefaults.core.descriptor import Record, descriptors_of
from classdefaults.layers.core import compose_defaults
from classdefaults.layers.models import Layer


def _warn_on_shadowed_methods(cls: type, declared: Mapping[Hashable, Any] | Any) -> None:
    for key in descriptors_of(declared):
        if not isinstance(key, str):
            continue
        attr = inspect.getattr_static(cls, key, None)
        if callable(attr) or isinstance(attr, classmethod | staticmethod):
            warnings.warn(
                f"Default {key!r} declared on {cls.__qualname__} shadows a method "
                f"of the same name on its instances.",
                stacklevel=3,
            )


def _layer_class(
    name: str,
    bases: tuple[type, ...],
    module: str,
    namespace: dict[str, Any] | None = None,
    **kwds: Any,
) -> type:
    def exec_body(ns: dict[str, Any]) -> None:
        ns["__module__"] = module
        ns.update(namespace or {})

    return types.new_class(name, bases, kwds, exec_body)


def _init_then_compose(base: type) -> Callable[..., None]:
    def __init__(self: Defaults, *args: Any, **kwargs: Any) -> None:
        base.__init__(self, *args, **kwargs)
        compose_defaults(self, type(self).__layer__)

    return __init__


class Defaults(Record):
    """Base class whose instances start with layered default properties.

    Declare defaults with `Parent.defaults({...})` as a base class, or with the
    `defaults=` class keyword. Subclasses without a declaration inherit their
    parent's defaults unchanged.
    """

    __layer__: ClassVar[Layer | None] = None
    _compose_after_init: ClassVar[bool] = False

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        instance = super().__new__(cls, *args, **kwargs)
        if not cls._compose_after_init:
            compose_defaults(instance, cls.__layer__)
        return instance

    def __init_subclass__(
        cls, defaults: Mapping[Hashable, Any] | Any | None = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        if defaults is None:
            return
        _warn_on_shadowed_methods(cls, defaults)
        # cls.__layer__ still resolves to the parent's layer here
        cls.__layer__ = Layer(defaults, parent=cls.__layer__, owner=cls.__qualname__)

    @classmethod
    def defaults(cls, defaults: Mapping[Hashable, Any] | Any | None = None) -> type[Self]:
        """Return a subclass that adds a defaults layer on top of this class.

        Args:
            defaults: Mapping of default values, `property` objects or
                descriptors; or a Record whose own properties are the defaults.
                The object is kept by reference and cloned per instance.

        Returns:
            A new class named `<ClassName>Defaults` deriving from this class.
        """
        return _layer_class(
            f"{cls.__name__}Defaults",
            (cls,),
            cls.__module__,
            defaults=defaults if defaults is not None else {},
        )

    @classmethod
    def extends(cls, base: type) -> type[Defaults]:
        """Graft default handling onto a class that does not derive from Defaults.

        The returned class derives from both Defaults and `base`; constructor
        arguments reach `base.__init__`. Defaults are attached once
        `base.__init__` returns, so they replace whatever it assigned. Subclass
        `__init__` bodies see them after calling `super().__init__()`.

        Args:
            base: Class to inherit behaviour from.

        Returns:
            A new class named `<BaseName>Defaults` with no defaults declared yet.

        Raises:
            TypeError: If called on a subclass of Defaults rather than Defaults itself.
        """
        if cls is not Defaults:
            raise TypeError(f"extends() is only available on Defaults, not on {cls.__name__}")
        return _layer_class(
            f"{base.__name__}Defaults",
            (Defaults, base),
            base.__module__,
            {"__init__": _init_then_compose(base), "_compose_after_init": True},
        )
