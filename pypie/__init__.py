"""
pypie: classes with polymorphism, inheritance and encapsulation.

Classes are declared at runtime with private, public, static and operator
members:

    from pypie import class_, extends, static, private, public, import_

    class_("Greeter")(
        public({"say_hello": lambda self, name: self.private_hello(name)}),
        private({"private_hello": lambda self, name: print("Hello " + name)}),
    )

    greeter = import_("Greeter")()
    greeter.say_hello("World")

Instances are public facades. Method bodies receive the private state as
`self`; private members are unreachable through the facade.
"""

from typing import Optional

from .config import Settings, allow_writing_to_objects, settings, show_warnings
from .errors import (
    AccessError,
    DefinitionError,
    PieError,
    UndefinedClassError,
    UndefinedMemberError,
)
from .model.catalog import Catalog, DefinitionBuilder, default_catalog
from .model.declarations import extends, operators, private, public, static
from .model.definition import ClassDefinition
from .runtime import ClassObject, base, layers

__version__ = "0.1.0"


def class_(name: str, catalog: Optional[Catalog] = None) -> DefinitionBuilder:
    """
    Open a class definition.

    Returns a builder that accepts the class body (extends, static, private,
    public and operators declarations) and returns the class object, the
    same object `import_(name)` returns afterwards.
    """
    return (catalog if catalog is not None else default_catalog).define(name)


def import_(name: str, catalog: Optional[Catalog] = None) -> ClassObject:
    """Return the class object last defined under `name`."""
    return (catalog if catalog is not None else default_catalog).import_class(name)


__all__ = [
    "class_",
    "import_",
    "extends",
    "static",
    "private",
    "public",
    "operators",
    "base",
    "layers",
    "show_warnings",
    "allow_writing_to_objects",
    "settings",
    "Settings",
    "Catalog",
    "DefinitionBuilder",
    "ClassDefinition",
    "ClassObject",
    "default_catalog",
    "PieError",
    "DefinitionError",
    "AccessError",
    "UndefinedMemberError",
    "UndefinedClassError",
]
