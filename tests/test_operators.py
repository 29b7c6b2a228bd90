"""
Tests for operator hooks installed from class bodies.
"""

import pytest

from pypie import Catalog, DefinitionError, class_, operators, public, static
from pypie.runtime import PrivateState


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def receivers():
    return []


@pytest.fixture
def Number(catalog, receivers):
    def add(self, other):
        receivers.append(self)
        return self.value + other

    return class_("Number", catalog)(
        public({
            "constructor": lambda self, value: setattr(self, "value", value),
            "get": lambda self: self.value,
            "add_inside": lambda self, other: self + other,
        }),
        operators({
            "__add__": add,
            "__eq__": lambda self, other: self.value == other.get(),
            "__len__": lambda self: self.value,
            "__str__": lambda self: f"Number({self.value})",
            "__call__": lambda self, factor: self.value * factor,
        }),
    )


def test_operator_gives_same_result_from_both_views(Number, receivers):
    """Addition through the facade and through the private state agree."""
    number = Number(40)

    outside = number + 2
    inside = number.add_inside(2)

    assert outside == inside == 42
    assert len(receivers) == 2
    assert all(isinstance(receiver, PrivateState) for receiver in receivers)
    assert receivers[0] is receivers[1]


def test_operator_can_use_public_methods_of_other_instance(Number):
    assert Number(3) == Number(3)
    assert not (Number(3) == Number(4))


def test_special_methods_work_on_facade(Number):
    number = Number(5)

    assert len(number) == 5
    assert str(number) == "Number(5)"
    assert number(3) == 15


def test_classes_without_operators_do_not_support_them(catalog):
    Plain = class_("Plain", catalog)(public({"f": lambda self: 1}))

    with pytest.raises(TypeError):
        Plain() + 1


@pytest.mark.parametrize("name", ["__getattr__", "__getattribute__", "__setattr__", "__init__"])
def test_reserved_operator_names_fail_at_definition_time(catalog, name):
    created = []

    with pytest.raises(DefinitionError, match="not allowed"):
        class_("Evil", catalog)(
            public({"constructor": lambda self: created.append(self)}),
            operators({name: lambda self, *args: None}),
        )

    assert created == []
    assert "Evil" not in catalog


def test_reserved_operator_names_fail_on_builder(catalog):
    with pytest.raises(DefinitionError):
        catalog.define("Evil").operators({"__setattr__": lambda self, k, v: None})


def test_operator_must_be_callable():
    with pytest.raises(DefinitionError, match="must be a function"):
        operators({"__add__": 1})


def test_operator_name_must_be_special_method():
    with pytest.raises(DefinitionError):
        operators({"add": lambda self, other: other})


def test_operators_are_per_class(catalog):
    Loud = class_("Loud", catalog)(operators({"__str__": lambda self: "LOUD"}))
    Quiet = class_("Quiet", catalog)(static({"volume": 0}))

    assert str(Loud()) == "LOUD"
    assert str(Quiet()) == "<Quiet object>"
