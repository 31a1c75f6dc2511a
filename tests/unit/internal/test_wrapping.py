from __future__ import annotations

import abc
import inspect
from typing import Any, NamedTuple

import pytest

from keywire._internal.wrapping import unwrap_constructor, wrap_constructor
from keywire.exceptions import KeywireInvalidRegistrationError


class Model:
    """A model with argument-dependent initialization."""

    def __init__(self, obj1: Any, obj2: Any = None, *, flag: bool = False) -> None:
        self.obj1 = obj1
        self.obj2 = obj2
        self.flag = flag


def test_wrapped_constructor_handles_arguments_like_the_original() -> None:
    obj1 = {"value": "foo"}
    obj2 = {"value": "bar"}
    original = Model(obj1, obj2, flag=True)

    wrapped_model = wrap_constructor(Model, None)(obj1, obj2, flag=True)

    assert wrapped_model.obj1 == original.obj1
    assert wrapped_model.obj2 == original.obj2
    assert wrapped_model.flag is original.flag


def test_wrapped_instances_are_instances_of_the_original() -> None:
    wrapped = wrap_constructor(Model)

    assert isinstance(wrapped(1), Model)
    assert issubclass(wrapped, Model)


def test_wrapped_class_keeps_name_docstring_and_signature() -> None:
    wrapped = wrap_constructor(Model)

    assert wrapped.__name__ == "Model"
    assert wrapped.__qualname__ == Model.__qualname__
    assert wrapped.__module__ == Model.__module__
    assert wrapped.__doc__ == Model.__doc__
    assert inspect.signature(wrapped) == inspect.signature(Model)


def test_hook_runs_before_init_body() -> None:
    events: list[str] = []

    class Consumer:
        def __init__(self) -> None:
            events.append(f"init sees {self.injected}")

    def hook(instance: Any) -> None:
        events.append("hook")
        instance.injected = "dependency"

    wrap_constructor(Consumer, hook)()

    assert events == ["hook", "init sees dependency"]


def test_hook_runs_once_per_instance() -> None:
    hooked: list[Any] = []
    wrapped = wrap_constructor(Model, hooked.append)

    first = wrapped(1)
    second = wrapped(2)

    assert hooked == [first, second]


def test_later_patches_of_the_original_init_are_honoured() -> None:
    class Patched:
        def __init__(self) -> None:
            self.version = 1

    wrapped = wrap_constructor(Patched)

    def patched_init(self: Any) -> None:
        self.version = 2

    Patched.__init__ = patched_init  # type: ignore[method-assign]

    assert wrapped().version == 2


def test_metaclasses_are_preserved() -> None:
    class Base(abc.ABC):  # noqa: B024
        pass

    wrapped = wrap_constructor(Base)

    assert type(wrapped) is abc.ABCMeta


def test_non_class_constructors_are_rejected() -> None:
    with pytest.raises(KeywireInvalidRegistrationError, match="Only classes can be wrapped"):
        wrap_constructor(lambda: None)  # type: ignore[type-var]


def test_unwrap_returns_the_original_class() -> None:
    wrapped = wrap_constructor(Model)

    assert unwrap_constructor(wrapped) is Model
    assert unwrap_constructor(Model) is Model


def test_unwrap_ignores_subclasses_of_wrapped_classes() -> None:
    wrapped = wrap_constructor(Model)

    class Sub(wrapped):  # type: ignore[valid-type, misc]
        pass

    assert unwrap_constructor(Sub) is Sub


class Point(NamedTuple):
    x: int
    y: int


class Tag(str):
    pass


def test_named_tuples_take_their_arguments_in_new() -> None:
    point = wrap_constructor(Point)(1, 2)

    assert point == Point(1, 2)
    assert isinstance(point, Point)


def test_str_subclasses_take_their_arguments_in_new() -> None:
    hooked: list[Any] = []

    tag = wrap_constructor(Tag, hooked.append)("abc")

    assert tag == "abc"
    assert hooked == [tag]
