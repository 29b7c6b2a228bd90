"""
Class definition records.

A ClassDefinition is the shared template for every instance of one class:
static storage, private and public method tables, operator hooks and the
(optional) parent class name. Member lookups go through explicit tables
rather than probing arbitrary attributes.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, Optional

from ..errors import DefinitionError


# Names that drive attribute interception and object layout.
RESERVED_OPERATORS = frozenset({
    "__getattr__",
    "__getattribute__",
    "__setattr__",
    "__delattr__",
    "__init__",
    "__new__",
    "__init_subclass__",
    "__slots__",
    "__dict__",
    "__class__",
})

# Field of a private state holding the parent layer.
SUPER_FIELD = "super"


class MemberKind(Enum):
    """What a name resolves to on the private side of a class."""
    PRIVATE = auto()
    PUBLIC = auto()
    STATIC = auto()
    FIELD = auto()  # not declared; falls through to per-instance storage


@dataclass
class ClassDefinition:
    """
    Template recording the members of one class.

    `statics` is the single storage cell shared by every instance of this
    class. It is not chained to the parent: each level of a hierarchy has
    its own.
    """
    name: str
    statics: Dict[str, Any] = field(default_factory=dict)
    private_methods: Dict[str, Callable] = field(default_factory=dict)
    public_methods: Dict[str, Callable] = field(default_factory=dict)
    operators: Dict[str, Callable] = field(default_factory=dict)
    parent: Optional[str] = None

    def is_private(self, key: str) -> bool:
        return key in self.private_methods

    def is_public(self, key: str) -> bool:
        return key in self.public_methods

    def is_static(self, key: str) -> bool:
        return key in self.statics

    def kind_of(self, key: str) -> MemberKind:
        """Resolve `key` in private-side order: private, public, static, field."""
        if key in self.private_methods:
            return MemberKind.PRIVATE
        if key in self.public_methods:
            return MemberKind.PUBLIC
        if key in self.statics:
            return MemberKind.STATIC
        return MemberKind.FIELD

    def method(self, key: str) -> Callable:
        """Return the private or public method body declared under `key`."""
        if key in self.private_methods:
            return self.private_methods[key]
        return self.public_methods[key]

    def __repr__(self):
        parent = f" extends {self.parent}" if self.parent else ""
        return (
            f"ClassDefinition({self.name}{parent}, "
            f"static={sorted(self.statics)}, "
            f"private={sorted(self.private_methods)}, "
            f"public={sorted(self.public_methods)}, "
            f"operators={sorted(self.operators)})"
        )


def check_member_name(section: str, key: str) -> None:
    if key == SUPER_FIELD:
        raise DefinitionError(
            f"{SUPER_FIELD!r} is reserved for the parent handle and cannot be a {section} member"
        )


def check_statics(table: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a static table: any value, but no reserved names."""
    for key in table:
        check_member_name("static", key)
    return dict(table)


def check_methods(section: str, table: Dict[str, Any]) -> Dict[str, Callable]:
    """Validate a private/public table: every entry must be callable."""
    for key, value in table.items():
        check_member_name(section, key)
        if not callable(value):
            raise DefinitionError(
                f"Only functions are supported in {section} definitions "
                f"({key!r} is {type(value).__name__})"
            )
    return dict(table)


def check_operators(table: Dict[str, Any]) -> Dict[str, Callable]:
    """Validate an operator table: callables under unreserved special-method names."""
    for key, value in table.items():
        if not callable(value):
            raise DefinitionError(f"Operator {key!r} must be a function")
        if key in RESERVED_OPERATORS:
            raise DefinitionError(f"Operator {key} is not allowed for classes.")
        if not (isinstance(key, str) and len(key) > 4
                and key.startswith("__") and key.endswith("__")):
            raise DefinitionError(f"{key!r} is not a special method name")
    return dict(table)
