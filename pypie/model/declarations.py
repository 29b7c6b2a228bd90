"""
Declarations that make up a class body.

    class_("Person")(
        extends("Greeter"),
        static({"count": 0}),
        public({"constructor": ...}),
        private({"private_intro": ...}),
        operators({"__add__": ...}),
    )

Each function validates its table immediately and returns an immutable
declaration. Nothing is written anywhere until the declaration is applied
to the builder that receives it.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .definition import check_methods, check_operators, check_statics


@dataclass(frozen=True)
class Declaration:
    """One section of a class body."""
    section: str  # "static", "private", "public" or "operators"
    entries: Mapping[str, Any]

    def apply(self, builder) -> None:
        getattr(builder, self.section)(self.entries)


@dataclass(frozen=True)
class Extends:
    """Single-parent inheritance; the parent is resolved by name at instantiation."""
    parent: str

    def apply(self, builder) -> None:
        builder.extends(self.parent)


def extends(name: str) -> Extends:
    return Extends(name)


def static(table: Mapping[str, Any]) -> Declaration:
    """Static members: data or functions, shared by every instance."""
    return Declaration("static", MappingProxyType(check_statics(table)))


def private(table: Mapping[str, Callable]) -> Declaration:
    """Private methods, reachable only through the instance's private state."""
    return Declaration("private", MappingProxyType(check_methods("private", table)))


def public(table: Mapping[str, Callable]) -> Declaration:
    """Public methods. A method named `constructor` runs on instantiation."""
    return Declaration("public", MappingProxyType(check_methods("public", table)))


def operators(table: Mapping[str, Callable]) -> Declaration:
    """
    Operator overloads keyed by special-method name (`__add__`, `__eq__`, ...).

    The first argument of every hook is the private state, whichever view
    triggered the operator.
    """
    return Declaration("operators", MappingProxyType(check_operators(table)))
