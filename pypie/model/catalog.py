"""
Class catalog and definition builder.

The catalog maps class names to committed definitions. Definitions are
assembled by a DefinitionBuilder that owns its record until finalize()
commits it, so opening one definition inside another cannot corrupt
either of them.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..errors import DefinitionError, UndefinedClassError
from ..runtime.factory import ClassObject
from .definition import ClassDefinition, check_methods, check_operators, check_statics

logger = logging.getLogger(__name__)


class DefinitionBuilder:
    """
    Accumulates declarations into one ClassDefinition.

    Calling the builder with declarations applies them and finalizes,
    returning the class object:

        Greeter = catalog.define("Greeter")(public({...}), private({...}))
    """

    def __init__(self, catalog: "Catalog", name: str):
        self.catalog = catalog
        self.definition = ClassDefinition(name=name)
        self.finalized = False

    def _open(self) -> ClassDefinition:
        if self.finalized:
            raise DefinitionError(f"Class {self.definition.name} is already finalized")
        return self.definition

    def extends(self, parent: str) -> "DefinitionBuilder":
        self._open().parent = parent
        return self

    def static(self, table: Mapping[str, Any]) -> "DefinitionBuilder":
        self._open().statics.update(check_statics(table))
        return self

    def private(self, table: Mapping[str, Callable]) -> "DefinitionBuilder":
        self._open().private_methods.update(check_methods("private", table))
        return self

    def public(self, table: Mapping[str, Callable]) -> "DefinitionBuilder":
        self._open().public_methods.update(check_methods("public", table))
        return self

    def operators(self, table: Mapping[str, Callable]) -> "DefinitionBuilder":
        self._open().operators.update(check_operators(table))
        return self

    def apply(self, *declarations) -> "DefinitionBuilder":
        for declaration in declarations:
            declaration.apply(self)
        return self

    def finalize(self) -> ClassObject:
        """Commit the definition to the catalog and return its class object."""
        definition = self._open()
        self.finalized = True
        return self.catalog.commit(definition)

    def __call__(self, *declarations) -> ClassObject:
        return self.apply(*declarations).finalize()

    def __repr__(self):
        state = "finalized" if self.finalized else "open"
        return f"DefinitionBuilder({self.definition.name}, {state})"


class Catalog:
    """Registry of class definitions, keyed by name. Last commit wins."""

    def __init__(self):
        self._classes: Dict[str, ClassObject] = {}

    def define(self, name: str) -> DefinitionBuilder:
        """Open a new definition named `name`."""
        return DefinitionBuilder(self, name)

    def commit(self, definition: ClassDefinition) -> ClassObject:
        """Register `definition`, silently replacing any class of the same name."""
        cls = ClassObject(definition, self)
        self._classes[definition.name] = cls
        logger.debug(f"Committed {definition!r}")
        return cls

    def import_class(self, name: str) -> ClassObject:
        try:
            return self._classes[name]
        except KeyError:
            raise UndefinedClassError(f"Class {name!r} is not defined") from None

    def lookup(self, name: str) -> ClassDefinition:
        return object.__getattribute__(self.import_class(name), "_definition")

    def lineage(self, definition: ClassDefinition) -> List[ClassDefinition]:
        """
        Definitions from `definition` up to its root class.

        Parents are resolved by name now, so the chain reflects the latest
        commit of every ancestor.
        """
        chain = [definition]
        seen = {definition.name}
        current: Optional[str] = definition.parent
        while current is not None:
            if current in seen:
                path = " -> ".join(d.name for d in chain)
                raise DefinitionError(f"Circular inheritance: {path} -> {current}")
            seen.add(current)
            parent = self.lookup(current)
            chain.append(parent)
            current = parent.parent
        return chain

    def names(self) -> List[str]:
        return list(self._classes)

    def __contains__(self, name: str) -> bool:
        return name in self._classes

    def __len__(self):
        return len(self._classes)

    def __repr__(self):
        return f"Catalog({sorted(self._classes)})"


default_catalog = Catalog()
