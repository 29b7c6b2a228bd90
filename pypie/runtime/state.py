"""
Instance types: the private state and the public facade.

Each instance is a pair. The private state holds the instance's fields and
is the receiver of every method body. The public facade is the only object
handed to callers; it stores nothing of its own and routes every access
through the policy in `access`.

Special (`__dunder__`) names bypass interception so Python's own machinery
keeps working; operator overloads live on per-class subclasses built by
`operators.build_instance_types`.
"""

from . import access
from ..model.definition import SUPER_FIELD


def is_special(key: str) -> bool:
    return key.startswith("__") and key.endswith("__")


class PrivateState:
    """Internal view of one instance at one level of its class hierarchy."""

    __slots__ = ("_definition", "_fields", "_parent")

    def __init__(self, definition, parent=None):
        object.__setattr__(self, "_definition", definition)
        object.__setattr__(self, "_fields", {} if parent is None else {SUPER_FIELD: parent})
        object.__setattr__(self, "_parent", parent)

    def __getattribute__(self, key):
        if is_special(key):
            return object.__getattribute__(self, key)
        return access.read_private(self, key)

    def __setattr__(self, key, value):
        access.write_private(self, key, value)

    def __delattr__(self, key):
        access.delete_private(self, key)

    def __repr__(self):
        return f"<{object.__getattribute__(self, '_definition').name} private state>"


class PublicFacade:
    """External view of one instance."""

    __slots__ = ("_state", "_parent", "_external")

    def __init__(self, state, parent=None):
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_external", {})

    def __getattribute__(self, key):
        if is_special(key):
            return object.__getattribute__(self, key)
        return access.read_public(self, key)

    def __setattr__(self, key, value):
        access.write_public(self, key, value)

    def __delattr__(self, key):
        access.delete_public(self, key)

    def __repr__(self):
        return f"<{access.definition_of(self).name} object>"
