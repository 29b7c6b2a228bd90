"""
Class objects and instance construction.

A ClassObject is what `class_(...)` and `import_(...)` hand back. Calling
it builds the private/public pair for a new instance, recursively building
one pair per ancestor with the same constructor arguments, and returns
only the public facade.
"""

import logging
from typing import Any, Tuple

from ..errors import AccessError, UndefinedMemberError
from ..model.definition import ClassDefinition
from .operators import build_instance_types
from .state import is_special

logger = logging.getLogger(__name__)


def _slot(obj, name: str) -> Any:
    return object.__getattribute__(obj, name)


class ClassObject:
    """
    Callable class object bound to one committed definition.

    Static members can be read (and existing ones assigned) directly on
    the class object. They take precedence over the class object's own
    attributes (`name`, `definition`), so reads and writes of a static
    always agree with what instances see.
    """

    __slots__ = ("_definition", "_catalog", "_state_type", "_facade_type")

    def __init__(self, definition: ClassDefinition, catalog):
        state_type, facade_type = build_instance_types(definition)
        object.__setattr__(self, "_definition", definition)
        object.__setattr__(self, "_catalog", catalog)
        object.__setattr__(self, "_state_type", state_type)
        object.__setattr__(self, "_facade_type", facade_type)

    @property
    def name(self) -> str:
        return _slot(self, "_definition").name

    @property
    def definition(self) -> ClassDefinition:
        return _slot(self, "_definition")

    def __call__(self, *args, **kwargs):
        definition = _slot(self, "_definition")
        # Resolves every ancestor by name and rejects inheritance cycles
        # before any constructor runs.
        _slot(self, "_catalog").lineage(definition)
        _, facade = construct(self, args, kwargs)
        logger.debug(f"Instantiated {definition.name}")
        return facade

    def __getattribute__(self, key):
        statics = _slot(self, "_definition").statics
        if not is_special(key) and key in statics:
            return statics[key]
        try:
            return object.__getattribute__(self, key)
        except AttributeError:
            if is_special(key):
                raise
            raise UndefinedMemberError(
                f"Class {_slot(self, '_definition').name} has no static member {key!r}"
            ) from None

    def __setattr__(self, key, value):
        definition = _slot(self, "_definition")
        if key not in definition.statics:
            raise AccessError(
                f"Cannot add {key!r} to class {definition.name}; "
                f"only declared static members can be assigned"
            )
        definition.statics[key] = value

    def __repr__(self):
        return f"<class {_slot(self, '_definition').name!r}>"


def construct(cls: ClassObject, args: tuple, kwargs: dict) -> Tuple[Any, Any]:
    """Build the (private state, public facade) pair of `cls`, ancestors first."""
    definition = _slot(cls, "_definition")
    catalog = _slot(cls, "_catalog")
    parent_state = parent_facade = None
    if definition.parent is not None:
        parent_class = catalog.import_class(definition.parent)
        parent_state, parent_facade = construct(parent_class, args, kwargs)

    state = _slot(cls, "_state_type")(definition, parent_state)
    facade = _slot(cls, "_facade_type")(state, parent_facade)

    constructor = definition.public_methods.get("constructor")
    if constructor is not None:
        constructor(state, *args, **kwargs)
    return state, facade
